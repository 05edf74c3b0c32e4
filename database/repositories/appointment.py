"""Appointment repository for database operations."""
from typing import Optional, List
from datetime import date

from sqlalchemy import select, delete, func

from database.models import Appointment
from database.repositories.base import BaseRepository


class AppointmentRepository(BaseRepository[Appointment]):
    """Repository for Appointment model operations."""

    model_class = Appointment

    async def get_for_participant(
        self,
        appointment_id: int,
        username: str,
        as_caregiver: bool,
    ) -> Optional[Appointment]:
        """Get appointment by ID only if the username is its patient (or caregiver)."""
        participant = Appointment.caregiver_username if as_caregiver else Appointment.patient_username
        result = await self.session.execute(
            select(Appointment)
            .where(Appointment.id == appointment_id, participant == username)
            .with_for_update()
        )
        return result.scalar_one_or_none()

    async def exists_for_slot(self, caregiver_username: str, slot_date: date) -> bool:
        """Check if the caregiver is already booked on the date."""
        result = await self.session.execute(
            select(func.count()).select_from(Appointment).where(
                Appointment.caregiver_username == caregiver_username,
                Appointment.date == slot_date,
            )
        )
        return (result.scalar() or 0) > 0

    async def next_id(self) -> int:
        """Smallest id greater than every existing id (1 for an empty table)."""
        result = await self.session.execute(select(func.max(Appointment.id)))
        return (result.scalar() or 0) + 1

    async def create(
        self,
        appointment_id: int,
        caregiver_username: str,
        patient_username: str,
        vaccine_name: str,
        slot_date: date,
    ) -> Appointment:
        """Create new appointment."""
        appointment = Appointment(
            id=appointment_id,
            caregiver_username=caregiver_username,
            patient_username=patient_username,
            vaccine_name=vaccine_name,
            date=slot_date,
        )

        self.add(appointment)
        await self.flush()
        return appointment

    async def remove(self, appointment_id: int) -> bool:
        """Delete appointment by ID."""
        result = await self.session.execute(
            delete(Appointment)
            .where(Appointment.id == appointment_id)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1

    async def list_for_patient(self, username: str) -> List[Appointment]:
        """Get patient's appointments ordered by ID."""
        result = await self.session.execute(
            select(Appointment)
            .where(Appointment.patient_username == username)
            .order_by(Appointment.id)
        )
        return list(result.scalars().all())

    async def list_for_caregiver(self, username: str) -> List[Appointment]:
        """Get caregiver's appointments ordered by ID."""
        result = await self.session.execute(
            select(Appointment)
            .where(Appointment.caregiver_username == username)
            .order_by(Appointment.id)
        )
        return list(result.scalars().all())

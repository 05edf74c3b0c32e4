"""
Appointment use cases: reserve, cancel and list.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import List

from services.use_cases.base import BaseUseCase
from database.repositories import AppointmentRepository
from core.exceptions import AppointmentNotFoundError
from core.session import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservationView:
    """Result of a successful reservation."""
    appointment_id: int
    caregiver: str


@dataclass(frozen=True)
class AppointmentView:
    """
    One appointment as seen by a participant.

    counterpart is the caregiver for a patient and the patient for a caregiver.
    """
    appointment_id: int
    vaccine_name: str
    date: date
    counterpart: str


class ReserveAppointmentUseCase(BaseUseCase[ReservationView]):
    """
    Book the earliest-by-username caregiver on a date and take one dose.

    The slot claim, the dose decrement, the id assignment and the insert
    all happen in the caller's transaction; any failure rolls all of them
    back, which restores a claimed slot.
    """

    async def execute(self, patient: str, slot_date: date, vaccine_name: str) -> ReservationView:
        """
        Raises:
            NoAvailabilityError: If no caregiver is open on the date
            InsufficientDosesError: If the vaccine is unknown or out of doses
        """
        repo = AppointmentRepository(self.session)

        caregiver = await self.board.claim_earliest_by_username(slot_date)
        await self.ledger.decrease(vaccine_name, 1)

        appointment_id = await repo.next_id()
        await repo.create(
            appointment_id=appointment_id,
            caregiver_username=caregiver,
            patient_username=patient,
            vaccine_name=vaccine_name,
            slot_date=slot_date,
        )

        logger.info(
            f"Appointment {appointment_id} reserved: {patient} with {caregiver} on {slot_date}",
            extra={
                "appointment_id": appointment_id,
                "username": patient,
                "caregiver": caregiver,
                "vaccine": vaccine_name,
                "date": str(slot_date),
            }
        )
        return ReservationView(appointment_id=appointment_id, caregiver=caregiver)


class CancelAppointmentUseCase(BaseUseCase[None]):
    """Cancel an appointment owned by the caller, returning its slot and dose."""

    async def execute(self, username: str, role: Role, appointment_id: int) -> None:
        """
        Raises:
            AppointmentNotFoundError: If absent or the caller is not its participant
        """
        repo = AppointmentRepository(self.session)

        appointment = await repo.get_for_participant(
            appointment_id,
            username,
            as_caregiver=Role(role) is Role.CAREGIVER,
        )
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)

        caregiver = appointment.caregiver_username
        slot_date = appointment.date
        vaccine_name = appointment.vaccine_name

        if not await repo.remove(appointment_id):
            raise AppointmentNotFoundError(appointment_id)
        await self.board.release(caregiver, slot_date)
        await self.ledger.increase(vaccine_name, 1)

        logger.info(
            f"Appointment {appointment_id} canceled by {username}",
            extra={
                "appointment_id": appointment_id,
                "username": username,
                "role": Role(role).value,
                "caregiver": caregiver,
                "vaccine": vaccine_name,
                "date": str(slot_date),
            }
        )


class ListAppointmentsUseCase(BaseUseCase[List[AppointmentView]]):
    """List the caller's appointments ordered by id."""

    async def execute(self, username: str, role: Role) -> List[AppointmentView]:
        repo = AppointmentRepository(self.session)

        if Role(role) is Role.CAREGIVER:
            appointments = await repo.list_for_caregiver(username)
            return [
                AppointmentView(a.id, a.vaccine_name, a.date, a.patient_username)
                for a in appointments
            ]

        appointments = await repo.list_for_patient(username)
        return [
            AppointmentView(a.id, a.vaccine_name, a.date, a.caregiver_username)
            for a in appointments
        ]

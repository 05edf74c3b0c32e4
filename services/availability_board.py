"""
Availability board: open (date, caregiver) slots.

A published slot lives here until a reservation claims it; cancelling the
reservation puts it back. For any published pair exactly one of an open slot
or an appointment exists.
"""
import logging
from datetime import date
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateSlotError, NoAvailabilityError
from database.repositories import AppointmentRepository, AvailabilityRepository

logger = logging.getLogger(__name__)


class AvailabilityBoard:
    """Publish, claim and release caregiver slots inside the caller's transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.slots = AvailabilityRepository(session)
        self.appointments = AppointmentRepository(session)

    async def publish(self, caregiver: str, slot_date: date) -> None:
        """
        Open a slot for the caregiver on the date.

        Raises:
            DuplicateSlotError: If the slot is already open or already booked
        """
        if await self.slots.exists(slot_date, caregiver):
            raise DuplicateSlotError(caregiver, slot_date)
        if await self.appointments.exists_for_slot(caregiver, slot_date):
            raise DuplicateSlotError(caregiver, slot_date)

        try:
            async with self.session.begin_nested():
                await self.slots.create(slot_date, caregiver)
        except IntegrityError as e:
            raise DuplicateSlotError(caregiver, slot_date) from e

        logger.info(
            f"Caregiver {caregiver} published {slot_date}",
            extra={"caregiver": caregiver, "date": str(slot_date)}
        )

    async def claim_earliest_by_username(self, slot_date: date) -> str:
        """
        Take the open slot with the smallest caregiver username on the date.

        Each candidate is removed with a conditional DELETE; a candidate that
        another transaction already took affects no row and the next one is
        tried.

        Returns:
            Username of the caregiver whose slot was claimed

        Raises:
            NoAvailabilityError: If no slot is open on the date
        """
        for caregiver in await self.slots.list_caregivers(slot_date, for_update=True):
            if await self.slots.remove(slot_date, caregiver):
                logger.debug(
                    f"Slot {slot_date} claimed from {caregiver}",
                    extra={"caregiver": caregiver, "date": str(slot_date)}
                )
                return caregiver

        raise NoAvailabilityError(slot_date)

    async def release(self, caregiver: str, slot_date: date) -> None:
        """Re-open a slot freed by a cancellation."""
        await self.slots.create(slot_date, caregiver)
        logger.debug(
            f"Slot {slot_date} released to {caregiver}",
            extra={"caregiver": caregiver, "date": str(slot_date)}
        )

    async def list_caregivers(self, slot_date: date) -> List[str]:
        return await self.slots.list_caregivers(slot_date)

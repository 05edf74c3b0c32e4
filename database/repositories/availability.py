"""Availability repository for database operations."""
from datetime import date
from typing import List

from sqlalchemy import select, delete, func

from database.models import Availability
from database.repositories.base import BaseRepository


class AvailabilityRepository(BaseRepository[Availability]):
    """Repository for Availability model operations."""

    model_class = Availability

    async def exists(self, slot_date: date, caregiver_username: str) -> bool:
        """Check if the caregiver has an open slot on the date."""
        result = await self.session.execute(
            select(func.count()).select_from(Availability).where(
                Availability.date == slot_date,
                Availability.caregiver_username == caregiver_username,
            )
        )
        return (result.scalar() or 0) > 0

    async def list_caregivers(self, slot_date: date, for_update: bool = False) -> List[str]:
        """Get usernames with an open slot on the date, ascending."""
        query = (
            select(Availability.caregiver_username)
            .where(Availability.date == slot_date)
            .order_by(Availability.caregiver_username.asc())
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(self, slot_date: date, caregiver_username: str) -> Availability:
        """Create new open slot."""
        availability = Availability(date=slot_date, caregiver_username=caregiver_username)

        self.add(availability)
        await self.flush()
        return availability

    async def remove(self, slot_date: date, caregiver_username: str) -> bool:
        """
        Delete a slot.

        Returns:
            True if exactly this slot was deleted, False if it was gone
        """
        result = await self.session.execute(
            delete(Availability)
            .where(
                Availability.date == slot_date,
                Availability.caregiver_username == caregiver_username,
            )
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1

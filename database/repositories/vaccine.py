"""Vaccine repository for database operations."""
from typing import Optional, List

from sqlalchemy import select, update

from database.models import Vaccine
from database.repositories.base import BaseRepository


class VaccineRepository(BaseRepository[Vaccine]):
    """Repository for Vaccine model operations."""

    model_class = Vaccine

    async def get_by_name(self, name: str, for_update: bool = False) -> Optional[Vaccine]:
        """Get vaccine by name, optionally locking the row."""
        query = select(Vaccine).where(Vaccine.name == name)
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Vaccine]:
        """Get all vaccines ordered by name."""
        result = await self.session.execute(select(Vaccine).order_by(Vaccine.name))
        return list(result.scalars().all())

    async def create(self, name: str, doses: int) -> Vaccine:
        """Create new vaccine with an initial stock."""
        vaccine = Vaccine(name=name, doses=doses)

        self.add(vaccine)
        await self.flush()
        return vaccine

    async def add_doses(self, name: str, delta: int, ceiling: int) -> bool:
        """
        Add doses in a single UPDATE unless the stock would pass ceiling.

        Returns:
            True if the vaccine exists and was updated
        """
        result = await self.session.execute(
            update(Vaccine)
            .where(Vaccine.name == name, Vaccine.doses <= ceiling - delta)
            .values(doses=Vaccine.doses + delta)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1

    async def take_doses(self, name: str, delta: int) -> bool:
        """
        Subtract doses only if enough remain, in a single UPDATE.

        Returns:
            True if the doses were taken, False if the vaccine is missing
            or has fewer than delta doses
        """
        result = await self.session.execute(
            update(Vaccine)
            .where(Vaccine.name == name, Vaccine.doses >= delta)
            .values(doses=Vaccine.doses - delta)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1

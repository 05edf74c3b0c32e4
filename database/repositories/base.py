"""
Base repository with common operations.

Provides a generic base class for all repositories to reduce code duplication.
"""
from typing import TypeVar, Generic, Type
from abc import ABC

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.base import Base

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository with common operations.

    Provides:
    - add: Add new entity to the session
    - flush: Flush pending changes
    - count: Count all entities

    Every method runs inside the caller's transaction; repositories never
    commit.

    Usage:
        class VaccineRepository(BaseRepository[Vaccine]):
            model_class = Vaccine

            async def take_doses(self, name: str, delta: int):
                # Custom method
                ...
    """

    model_class: Type[ModelType]

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def count(self) -> int:
        """
        Count all entities.

        Returns:
            Total count of entities
        """
        result = await self.session.execute(
            select(func.count()).select_from(self.model_class)
        )
        return result.scalar() or 0

    def add(self, entity: ModelType) -> None:
        """
        Add entity to session (for create operations).

        Args:
            entity: Entity to add
        """
        self.session.add(entity)

    async def flush(self) -> None:
        """Flush session changes to database."""
        await self.session.flush()

"""
Base use case class with common functionality.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from sqlalchemy.ext.asyncio import AsyncSession

from services.accounts import AccountStore
from services.availability_board import AvailabilityBoard
from services.dose_ledger import DoseLedger


ResultType = TypeVar("ResultType")


class BaseUseCase(ABC, Generic[ResultType]):
    """
    Abstract base class for use cases.

    A use case encapsulates a single business operation and orchestrates
    the board, the ledger and the repositories inside one transaction that
    the caller owns. Use cases never commit.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize use case with database session.

        Args:
            session: Async SQLAlchemy session with an open transaction
        """
        self.session = session
        self.board = AvailabilityBoard(session)
        self.ledger = DoseLedger(session)
        self.accounts = AccountStore(session)

    @abstractmethod
    async def execute(self, *args, **kwargs) -> ResultType:
        """
        Execute the use case.

        Subclasses must implement this method with their specific logic.

        Returns:
            Result of the use case execution
        """
        pass

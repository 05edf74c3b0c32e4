"""
Availability use cases for caregivers and the schedule search.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Tuple

from services.use_cases.base import BaseUseCase


@dataclass(frozen=True)
class ScheduleView:
    """Caregivers open on a date plus every vaccine with its dose count."""
    date: date
    caregivers: List[str] = field(default_factory=list)
    vaccines: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def has_caregivers(self) -> bool:
        return bool(self.caregivers)


class PublishAvailabilityUseCase(BaseUseCase[None]):
    """Open a slot for a caregiver."""

    async def execute(self, caregiver: str, slot_date: date) -> None:
        await self.board.publish(caregiver, slot_date)


class SearchScheduleUseCase(BaseUseCase[ScheduleView]):
    """
    Who is open on a date, and what can be booked.

    Vaccines are listed regardless of the date.
    """

    async def execute(self, slot_date: date) -> ScheduleView:
        caregivers = await self.board.list_caregivers(slot_date)
        vaccines = await self.ledger.list_all()
        return ScheduleView(
            date=slot_date,
            caregivers=caregivers,
            vaccines=[(v.name, v.doses) for v in vaccines],
        )

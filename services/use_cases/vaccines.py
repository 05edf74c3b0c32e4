"""
Vaccine stock use cases.
"""
import logging

from services.use_cases.base import BaseUseCase

logger = logging.getLogger(__name__)


class AddDosesUseCase(BaseUseCase[int]):
    """Create a vaccine or top up its stock; returns the new dose count."""

    async def execute(self, caregiver: str, vaccine_name: str, doses: int) -> int:
        available = await self.ledger.increase(vaccine_name, doses)
        logger.info(
            f"{caregiver} added {doses} doses of {vaccine_name}",
            extra={"username": caregiver, "vaccine": vaccine_name}
        )
        return available

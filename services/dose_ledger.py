"""
Dose ledger: the shared pool of vaccine doses.

Owns the invariant that a vaccine's available dose count never drops below
zero. Every mutation is a single conditional UPDATE, so a check-then-write
gap is never visible to a concurrent caller.
"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.dto.base import MAX_INTEGER
from core.exceptions import InsufficientDosesError, ValidationError
from database.models import Vaccine
from database.repositories import VaccineRepository

logger = logging.getLogger(__name__)


def _require_positive(delta: int) -> None:
    if not isinstance(delta, int) or isinstance(delta, bool) or not 0 < delta <= MAX_INTEGER:
        raise ValidationError("doses", f"must be an integer in 1..{MAX_INTEGER}, got {delta!r}")


class DoseLedger:
    """Atomic increase/decrease of vaccine stock inside the caller's transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.vaccines = VaccineRepository(session)

    async def get(self, name: str) -> Optional[Vaccine]:
        return await self.vaccines.get_by_name(name)

    async def list_all(self) -> List[Vaccine]:
        return await self.vaccines.list_all()

    async def ensure_vaccine(self, name: str, initial_doses: int = 0) -> Vaccine:
        """Create the vaccine with initial_doses if absent; existing stock is untouched."""
        if initial_doses < 0:
            raise ValidationError("doses", "initial doses must not be negative")
        vaccine = await self.vaccines.get_by_name(name, for_update=True)
        if vaccine is None:
            vaccine = await self.vaccines.create(name, initial_doses)
            logger.info(
                f"Vaccine {name} created with {initial_doses} doses",
                extra={"vaccine": name}
            )
        return vaccine

    async def increase(self, name: str, delta: int) -> int:
        """
        Add doses, creating the vaccine with delta doses if it is unknown.

        Returns:
            New available dose count

        Raises:
            ValidationError: If the stock would exceed MAX_INTEGER
        """
        _require_positive(delta)
        if not await self.vaccines.add_doses(name, delta, ceiling=MAX_INTEGER):
            if await self.vaccines.get_by_name(name) is not None:
                raise ValidationError("doses", f"stock of {name} would exceed {MAX_INTEGER}")
            await self.ensure_vaccine(name, 0)
            await self.vaccines.add_doses(name, delta, ceiling=MAX_INTEGER)

        vaccine = await self.vaccines.get_by_name(name)
        logger.debug(
            f"Vaccine {name} +{delta} -> {vaccine.doses}",
            extra={"vaccine": name}
        )
        return vaccine.doses

    async def decrease(self, name: str, delta: int) -> int:
        """
        Remove doses if enough remain.

        Returns:
            New available dose count

        Raises:
            InsufficientDosesError: If the vaccine is unknown or has fewer than delta doses
        """
        _require_positive(delta)
        if not await self.vaccines.take_doses(name, delta):
            vaccine = await self.vaccines.get_by_name(name)
            raise InsufficientDosesError(
                vaccine_name=name,
                requested=delta,
                available=vaccine.doses if vaccine else 0,
            )

        vaccine = await self.vaccines.get_by_name(name)
        logger.debug(
            f"Vaccine {name} -{delta} -> {vaccine.doses}",
            extra={"vaccine": name}
        )
        return vaccine.doses

"""
Booking engine: the single entry point for every scheduling operation.

Each call checks the session first, without touching the database, then
validates its input and runs one serializable transaction. Anything that
fails inside the transaction rolls all of it back.
"""
import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from core.dto import (
    AddDosesDTO,
    CancelAppointmentDTO,
    CreateAccountDTO,
    LoginDTO,
    PublishAvailabilityDTO,
    ReserveAppointmentDTO,
    SearchScheduleDTO,
    validate_dto,
)
from core.exceptions import StorageUnavailableError
from core.session import Role, SessionContext
from database.base import async_session_maker, close_db, engine as default_engine, init_db
from services.use_cases import (
    AddDosesUseCase,
    AppointmentView,
    CancelAppointmentUseCase,
    ListAppointmentsUseCase,
    LoginUseCase,
    PublishAvailabilityUseCase,
    RegisterAccountUseCase,
    ReservationView,
    ReserveAppointmentUseCase,
    ScheduleView,
    SearchScheduleUseCase,
)

logger = logging.getLogger(__name__)

DateInput = Union[str, date]


class BookingEngine:
    """
    Async facade over accounts, availability, doses and appointments.

    Usage:
        booking = BookingEngine()
        await booking.init()
        ctx = await booking.login(SessionContext.anonymous(), "ann", "Secret#123", Role.PATIENT)
        reservation = await booking.reserve(ctx, "2024-05-01", "Pfizer")
    """

    def __init__(
        self,
        session_maker: Optional[async_sessionmaker[AsyncSession]] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        self.session_maker = session_maker or async_session_maker
        self.engine = engine or default_engine

    async def init(self) -> None:
        """Create tables if missing."""
        await init_db(self.engine)

    async def close(self) -> None:
        """Dispose the engine's connections."""
        await close_db(self.engine)

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        One session, one transaction: commit on success, roll back on any error.

        Raises:
            StorageUnavailableError: On connection loss, lock timeout,
                serialization failure or constraint race
        """
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Storage error during {operation}: {e}",
                exc_info=True,
                extra={"command": operation}
            )
            raise StorageUnavailableError() from e

    # ============== Accounts & Session ==============

    async def register(self, username: str, password: str, role: Role) -> str:
        """
        Create a patient or caregiver account. Allowed in any session state.

        Raises:
            WeakPasswordError: If the password breaks the strength policy
            DuplicateUsernameError: If the username is taken
        """
        dto = validate_dto(CreateAccountDTO, username=username, password=password, role=role)
        async with self._transaction("register") as session:
            return await RegisterAccountUseCase(session).execute(dto.username, dto.password, dto.role)

    async def login(self, ctx: SessionContext, username: str, password: str, role: Role) -> SessionContext:
        """
        Authenticate and return the new session.

        Raises:
            AlreadyAuthenticatedError: If someone is logged in
            InvalidCredentialsError: On any credential mismatch
        """
        ctx.require_logged_out()
        dto = validate_dto(LoginDTO, username=username, password=password, role=role)
        async with self._transaction("login") as session:
            new_ctx = await LoginUseCase(session).execute(dto.username, dto.password, dto.role)

        logger.info(
            f"Logged in as {new_ctx.username}",
            extra={"username": new_ctx.username, "role": new_ctx.role.value}
        )
        return new_ctx

    async def logout(self, ctx: SessionContext) -> SessionContext:
        """Return the logged-out session."""
        username = ctx.require_authenticated("Please login first.")
        logger.info(f"Logged out {username}", extra={"username": username})
        return SessionContext.anonymous()

    # ============== Caregiver operations ==============

    async def publish_availability(self, ctx: SessionContext, slot_date: DateInput) -> None:
        """
        Raises:
            DuplicateSlotError: If the date is already open or booked for this caregiver
        """
        caregiver = ctx.require_caregiver()
        dto = validate_dto(PublishAvailabilityDTO, slot_date=slot_date)
        async with self._transaction("publish_availability") as session:
            await PublishAvailabilityUseCase(session).execute(caregiver, dto.slot_date)

    async def add_doses(self, ctx: SessionContext, vaccine_name: str, doses: int) -> int:
        """Create or top up a vaccine; returns the new dose count."""
        caregiver = ctx.require_caregiver()
        dto = validate_dto(AddDosesDTO, vaccine_name=vaccine_name, doses=doses)
        async with self._transaction("add_doses") as session:
            return await AddDosesUseCase(session).execute(caregiver, dto.vaccine_name, dto.doses)

    # ============== Patient operations ==============

    async def reserve(self, ctx: SessionContext, slot_date: DateInput, vaccine_name: str) -> ReservationView:
        """
        Book one dose with the earliest-by-username caregiver open on the date.

        Raises:
            NoAvailabilityError: If nobody is open on the date
            InsufficientDosesError: If the vaccine is unknown or exhausted
        """
        patient = ctx.require_patient()
        dto = validate_dto(ReserveAppointmentDTO, slot_date=slot_date, vaccine_name=vaccine_name)
        async with self._transaction("reserve") as session:
            return await ReserveAppointmentUseCase(session).execute(patient, dto.slot_date, dto.vaccine_name)

    # ============== Shared operations ==============

    async def cancel(self, ctx: SessionContext, appointment_id: int) -> None:
        """
        Cancel one of the caller's appointments.

        Raises:
            AppointmentNotFoundError: If absent or owned by someone else
        """
        username = ctx.require_authenticated()
        dto = validate_dto(CancelAppointmentDTO, appointment_id=appointment_id)
        async with self._transaction("cancel") as session:
            await CancelAppointmentUseCase(session).execute(username, ctx.role, dto.appointment_id)

    async def list_appointments(self, ctx: SessionContext) -> List[AppointmentView]:
        username = ctx.require_authenticated()
        async with self._transaction("list_appointments") as session:
            return await ListAppointmentsUseCase(session).execute(username, ctx.role)

    async def search_schedule(self, ctx: SessionContext, slot_date: DateInput) -> ScheduleView:
        ctx.require_authenticated()
        dto = validate_dto(SearchScheduleDTO, slot_date=slot_date)
        async with self._transaction("search_schedule") as session:
            return await SearchScheduleUseCase(session).execute(dto.slot_date)

"""
Command dispatcher: one console line in, rendered text lines out.

The dispatcher owns the console's SessionContext. Login and logout replace
it with the value the booking engine returns; every other command passes it
through unchanged.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from core.exceptions import ValidationError
from core.session import Role, SessionContext
from console.messages import AppointmentMessages, CommonMessages, ErrorMessages
from services.booking import BookingEngine

logger = logging.getLogger(__name__)

Handler = Callable[["Command", dict], Awaitable[List[str]]]


@dataclass(frozen=True)
class Command:
    """A tokenized console line."""
    name: str
    args: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        tokens = line.split()
        if not tokens:
            return None
        return cls(name=tokens[0], args=tuple(tokens[1:]))


def _expect_args(event: Command, count: int, message: str = ErrorMessages.TRY_AGAIN) -> None:
    if len(event.args) != count:
        raise ValidationError(
            "args",
            f"{event.name} takes {count} arguments, got {len(event.args)}",
            message=message,
        )


class CommandDispatcher:
    """
    Route console commands to the booking engine through middlewares.

    Usage:
        dispatcher = CommandDispatcher(BookingEngine())
        setup_middlewares(dispatcher)
        lines = await dispatcher.dispatch("login_patient ann Secret#123")
    """

    def __init__(self, booking: BookingEngine, ctx: Optional[SessionContext] = None):
        self.booking = booking
        self.ctx = ctx or SessionContext.anonymous()
        self.finished = False
        self._middlewares: List[Callable] = []
        self._handlers: Dict[str, Handler] = {
            "create_patient": partial(self._create_account, Role.PATIENT),
            "create_caregiver": partial(self._create_account, Role.CAREGIVER),
            "login_patient": partial(self._login, Role.PATIENT),
            "login_caregiver": partial(self._login, Role.CAREGIVER),
            "search_caregiver_schedule": self._search_caregiver_schedule,
            "reserve": self._reserve,
            "upload_availability": self._upload_availability,
            "cancel": self._cancel,
            "add_doses": self._add_doses,
            "show_appointments": self._show_appointments,
            "logout": self._logout,
            "help": self._help,
            "quit": self._quit,
        }

    def middleware(self, middleware: Callable) -> None:
        """Register a middleware; the first registered runs outermost."""
        self._middlewares.append(middleware)

    async def dispatch(self, line: str) -> List[str]:
        """Run one console line and return the lines to print."""
        event = Command.parse(line)
        if event is None:
            return [ErrorMessages.TRY_AGAIN]

        handler: Handler = self._handlers.get(event.name, self._unknown)
        for middleware in reversed(self._middlewares):
            handler = partial(middleware, handler)
        return await handler(event, {"ctx": self.ctx})

    # ============== Accounts & Session ==============

    async def _create_account(self, role: Role, event: Command, data: dict) -> List[str]:
        _expect_args(event, 2, ErrorMessages.CREATE_USER_FAILED)
        username, password = event.args
        await self.booking.register(username, password, role)
        return [CommonMessages.created_user(username)]

    async def _login(self, role: Role, event: Command, data: dict) -> List[str]:
        self.ctx.require_logged_out()
        _expect_args(event, 2, ErrorMessages.LOGIN_FAILED)
        username, password = event.args
        self.ctx = await self.booking.login(self.ctx, username, password, role)
        return [CommonMessages.logged_in(self.ctx.username)]

    async def _logout(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_authenticated("Please login first.")
        _expect_args(event, 0)
        self.ctx = await self.booking.logout(self.ctx)
        return [CommonMessages.LOGGED_OUT]

    # ============== Scheduling ==============

    async def _search_caregiver_schedule(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_authenticated()
        _expect_args(event, 1)
        schedule = await self.booking.search_schedule(self.ctx, event.args[0])
        return AppointmentMessages.schedule(schedule)

    async def _reserve(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_patient()
        _expect_args(event, 2)
        slot_date, vaccine_name = event.args
        reservation = await self.booking.reserve(self.ctx, slot_date, vaccine_name)
        return AppointmentMessages.reservation(reservation)

    async def _upload_availability(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_caregiver()
        _expect_args(event, 1)
        await self.booking.publish_availability(self.ctx, event.args[0])
        return [CommonMessages.AVAILABILITY_UPLOADED]

    async def _cancel(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_authenticated()
        _expect_args(event, 1)
        await self.booking.cancel(self.ctx, event.args[0])
        return [AppointmentMessages.CANCELED]

    async def _add_doses(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_caregiver()
        _expect_args(event, 2)
        vaccine_name, doses = event.args
        await self.booking.add_doses(self.ctx, vaccine_name, doses)
        return [CommonMessages.DOSES_UPDATED]

    async def _show_appointments(self, event: Command, data: dict) -> List[str]:
        self.ctx.require_authenticated()
        _expect_args(event, 0)
        appointments = await self.booking.list_appointments(self.ctx)
        return AppointmentMessages.appointments(appointments, self.ctx.role)

    # ============== Console ==============

    async def _help(self, event: Command, data: dict) -> List[str]:
        return CommonMessages.help_lines()

    async def _quit(self, event: Command, data: dict) -> List[str]:
        self.finished = True
        return [CommonMessages.BYE]

    async def _unknown(self, event: Command, data: dict) -> List[str]:
        logger.debug(f"Unknown command {event.name!r}", extra={"command": event.name})
        return [CommonMessages.INVALID_OPERATION]

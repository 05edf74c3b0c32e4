"""
Session context passed explicitly into every booking operation.

A SessionContext is an immutable value: login and logout return a new value
instead of mutating shared state, so at most one identity is ever active for
a given console.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.exceptions import (
    AlreadyAuthenticatedError,
    NotAuthenticatedError,
    WrongRoleError,
)


class Role(str, Enum):
    """Account role enum."""
    PATIENT = "patient"
    CAREGIVER = "caregiver"


class SessionState(str, Enum):
    """Session state machine states."""
    LOGGED_OUT = "logged_out"
    LOGGED_IN_PATIENT = "logged_in_patient"
    LOGGED_IN_CAREGIVER = "logged_in_caregiver"


@dataclass(frozen=True)
class SessionContext:
    """Currently authenticated identity, or nobody."""

    username: Optional[str] = None
    role: Optional[Role] = None

    def __post_init__(self):
        if (self.username is None) != (self.role is None):
            raise ValueError("username and role must be set together")

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls()

    @classmethod
    def for_account(cls, username: str, role: Role) -> "SessionContext":
        return cls(username=username, role=Role(role))

    @property
    def state(self) -> SessionState:
        if self.role is Role.PATIENT:
            return SessionState.LOGGED_IN_PATIENT
        if self.role is Role.CAREGIVER:
            return SessionState.LOGGED_IN_CAREGIVER
        return SessionState.LOGGED_OUT

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    @property
    def is_patient(self) -> bool:
        return self.role is Role.PATIENT

    @property
    def is_caregiver(self) -> bool:
        return self.role is Role.CAREGIVER

    def require_logged_out(self) -> None:
        """Raise AlreadyAuthenticatedError unless nobody is logged in."""
        if self.is_authenticated:
            raise AlreadyAuthenticatedError()

    def require_authenticated(self, message: Optional[str] = None) -> str:
        """Return the username of any logged-in account."""
        if not self.is_authenticated:
            raise NotAuthenticatedError(message)
        return self.username

    def require_patient(self) -> str:
        """Return the username of the logged-in patient."""
        if not self.is_authenticated:
            raise NotAuthenticatedError()
        if not self.is_patient:
            raise WrongRoleError("Please login as a patient!")
        return self.username

    def require_caregiver(self) -> str:
        """Return the username of the logged-in caregiver."""
        message = "Please login as a caregiver first!"
        if not self.is_authenticated:
            raise NotAuthenticatedError(message)
        if not self.is_caregiver:
            raise WrongRoleError(message)
        return self.username

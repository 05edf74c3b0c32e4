"""
Custom application exceptions.

These exceptions represent business logic errors that should be handled
gracefully with user-friendly messages. Every one of them is recoverable at
the console boundary: the message is shown and the session stays as it was.
"""
from datetime import date
from typing import Optional


class VaccineSchedulerError(Exception):
    """Base exception for all application errors."""

    message: str = "Please try again!"
    retryable: bool = False

    def __init__(self, message: Optional[str] = None, **kwargs):
        self.message = message or self.message
        self.details = kwargs
        super().__init__(self.message)


# ============== Authentication & Session ==============

class SessionError(VaccineSchedulerError):
    """Base session gating error."""
    message = "Please login first!"


class NotAuthenticatedError(SessionError):
    """Nobody is logged in."""
    message = "Please login first!"


class AlreadyAuthenticatedError(SessionError):
    """Someone is already logged in; logout first."""
    message = "User already logged in."


class WrongRoleError(SessionError):
    """The logged-in account has the wrong role for this action."""
    message = "Please login with the right account type!"


class InvalidCredentialsError(VaccineSchedulerError):
    """Unknown username or wrong password (deliberately indistinguishable)."""
    message = "Login failed."


# ============== Accounts ==============

class AccountError(VaccineSchedulerError):
    """Base account error."""
    message = "Failed to create user."


class DuplicateUsernameError(AccountError):
    """Username is already registered."""
    message = "Username taken, try again!"

    def __init__(self, username: Optional[str] = None):
        self.username = username
        super().__init__()


# ============== Availability ==============

class AvailabilityError(VaccineSchedulerError):
    """Base availability error."""
    message = "Error occurred when uploading availability"


class DuplicateSlotError(AvailabilityError):
    """Caregiver already published (or is booked on) this date."""
    message = "Availability already uploaded for this date!"

    def __init__(self, caregiver: Optional[str] = None, slot_date: Optional[date] = None):
        self.caregiver = caregiver
        self.slot_date = slot_date
        super().__init__()


class NoAvailabilityError(AvailabilityError):
    """No caregiver has an open slot on the requested date."""
    message = "No available caregiver!"

    def __init__(self, slot_date: Optional[date] = None):
        self.slot_date = slot_date
        super().__init__()


# ============== Vaccines ==============

class VaccineError(VaccineSchedulerError):
    """Base vaccine error."""
    message = "Error occurred when adding doses"


class InsufficientDosesError(VaccineError):
    """Vaccine is unknown or has fewer doses than requested."""
    message = "No available vaccine!"

    def __init__(self, vaccine_name: Optional[str] = None, requested: int = 1, available: int = 0):
        self.vaccine_name = vaccine_name
        self.requested = requested
        self.available = available
        super().__init__()


# ============== Appointments ==============

class AppointmentError(VaccineSchedulerError):
    """Base appointment error."""
    message = "Appointment error"


class AppointmentNotFoundError(AppointmentError):
    """Appointment is absent or not owned by the current account."""
    message = "You have no such appointment!"

    def __init__(self, appointment_id: Optional[int] = None):
        self.appointment_id = appointment_id
        super().__init__()


# ============== Validation ==============

class ValidationError(VaccineSchedulerError):
    """Malformed or out-of-range input."""
    message = "Please try again!"

    def __init__(self, field: Optional[str] = None, error: Optional[str] = None, message: Optional[str] = None):
        self.field = field
        self.error = error
        super().__init__(message)


class InvalidDateError(ValidationError):
    """Date is not a valid YYYY-MM-DD value."""
    def __init__(self, value: Optional[str] = None):
        super().__init__("date", f"Invalid format: {value}", message="Please enter a valid date!")


class WeakPasswordError(ValidationError):
    """Password does not meet the strength policy."""

    def __init__(self, error: Optional[str] = None, min_length: int = 8):
        self.min_length = min_length
        super().__init__("password", error, message="\n".join([
            f"- Password must be at least {min_length} characters long",
            "- Must include at least one character from each of the following types:",
            "  - Uppercase letters (A-Z)",
            "  - Lowercase letters (a-z)",
            "  - Numbers (0-9)",
            "  - Special characters (e.g., !@#$%^&*()_+-=[]{}|;':\",.<>?/)",
        ]))


# ============== Storage ==============

class StorageUnavailableError(VaccineSchedulerError):
    """Datastore transport failure, lock timeout or serialization conflict."""
    message = "Storage is temporarily unavailable, please try again."
    retryable = True

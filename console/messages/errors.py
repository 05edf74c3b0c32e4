"""Error messages for user-facing error handling."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorMessages:
    """User-friendly error messages not carried by an exception."""

    # General errors
    GENERIC_ERROR = "Something went wrong, please try again."
    TRY_AGAIN = "Please try again!"

    # Argument count errors for commands with their own failure text
    CREATE_USER_FAILED = "Failed to create user."
    LOGIN_FAILED = "Login failed."

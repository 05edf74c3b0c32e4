"""Common messages used across the console."""
from dataclasses import dataclass
from typing import List

COMMANDS = (
    "create_patient <username> <password>",
    "create_caregiver <username> <password>",
    "login_patient <username> <password>",
    "login_caregiver <username> <password>",
    "search_caregiver_schedule <date>",
    "reserve <date> <vaccine>",
    "upload_availability <date>",
    "cancel <appointment_id>",
    "add_doses <vaccine> <number>",
    "show_appointments",
    "logout",
    "help",
    "quit",
)


@dataclass(frozen=True)
class CommonMessages:
    """Greeting, help and confirmations."""

    WELCOME = "Welcome to the COVID-19 Vaccine Reservation Scheduling Application!"
    COMMANDS_HEADER = "*** Please enter one of the following commands ***"
    PROMPT = "> "
    BYE = "Bye!"
    INVALID_OPERATION = "Invalid operation name!"

    LOGGED_OUT = "Successfully logged out!"
    AVAILABILITY_UPLOADED = "Availability uploaded!"
    DOSES_UPDATED = "Doses updated!"

    @staticmethod
    def help_lines() -> List[str]:
        return [CommonMessages.COMMANDS_HEADER] + [f"> {c}" for c in COMMANDS]

    @staticmethod
    def greeting() -> List[str]:
        return [CommonMessages.WELCOME] + CommonMessages.help_lines()

    @staticmethod
    def created_user(username: str) -> str:
        return f"Created user {username}"

    @staticmethod
    def logged_in(username: str) -> str:
        return f"Logged in as: {username}"

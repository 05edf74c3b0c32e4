"""Database models package."""
from database.models.account import Account
from database.models.vaccine import Vaccine
from database.models.availability import Availability
from database.models.appointment import Appointment

__all__ = [
    "Account",
    "Vaccine",
    "Availability",
    "Appointment",
]

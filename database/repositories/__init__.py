"""Database repositories package."""
from database.repositories.account import AccountRepository
from database.repositories.vaccine import VaccineRepository
from database.repositories.availability import AvailabilityRepository
from database.repositories.appointment import AppointmentRepository

__all__ = [
    "AccountRepository",
    "VaccineRepository",
    "AvailabilityRepository",
    "AppointmentRepository",
]

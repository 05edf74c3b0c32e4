"""
Messages package for centralized text management.

This package contains all user-facing messages organized by domain:
- common.py: Greeting, help and confirmations
- appointments.py: Reservation, appointment and schedule rendering
- errors.py: Error messages
"""

from console.messages.common import CommonMessages
from console.messages.appointments import AppointmentMessages
from console.messages.errors import ErrorMessages

__all__ = [
    'CommonMessages',
    'AppointmentMessages',
    'ErrorMessages',
]

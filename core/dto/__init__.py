"""
Data Transfer Objects (DTOs) for data validation.

This package contains Pydantic models for validating command input.
"""

from core.dto.accounts import (
    CreateAccountDTO,
    LoginDTO,
)
from core.dto.appointments import (
    ReserveAppointmentDTO,
    CancelAppointmentDTO,
)
from core.dto.availability import (
    PublishAvailabilityDTO,
    SearchScheduleDTO,
)
from core.dto.vaccines import (
    AddDosesDTO,
)
from core.dto.base import validate_dto

__all__ = [
    'CreateAccountDTO',
    'LoginDTO',
    'ReserveAppointmentDTO',
    'CancelAppointmentDTO',
    'PublishAvailabilityDTO',
    'SearchScheduleDTO',
    'AddDosesDTO',
    'validate_dto',
]

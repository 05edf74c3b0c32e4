"""Appointment DTOs for data validation."""
from datetime import date

from pydantic import BaseModel, Field, field_validator

from core.dto.base import MAX_INTEGER, parse_iso_date


class ReserveAppointmentDTO(BaseModel):
    """DTO for reserving an appointment."""

    slot_date: date = Field(..., description="Requested date")
    vaccine_name: str = Field(..., min_length=1, max_length=255, description="Vaccine to reserve a dose of")

    @field_validator('slot_date', mode='before')
    @classmethod
    def validate_date(cls, v):
        return parse_iso_date(v)

    @field_validator('vaccine_name')
    @classmethod
    def validate_vaccine_name(cls, v: str) -> str:
        """Clean vaccine name."""
        v = v.strip()
        if not v:
            raise ValueError("Vaccine name is required")
        return v


class CancelAppointmentDTO(BaseModel):
    """DTO for cancelling an appointment."""

    appointment_id: int = Field(..., gt=0, le=MAX_INTEGER, description="Appointment ID")

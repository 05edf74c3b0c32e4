"""Availability DTOs for data validation."""
from datetime import date

from pydantic import BaseModel, Field, field_validator

from core.dto.base import parse_iso_date


class PublishAvailabilityDTO(BaseModel):
    """DTO for a caregiver publishing an open date."""

    slot_date: date = Field(..., description="Date the caregiver is available")

    @field_validator('slot_date', mode='before')
    @classmethod
    def validate_date(cls, v):
        return parse_iso_date(v)


class SearchScheduleDTO(BaseModel):
    """DTO for searching caregiver availability."""

    slot_date: date = Field(..., description="Date to search")

    @field_validator('slot_date', mode='before')
    @classmethod
    def validate_date(cls, v):
        return parse_iso_date(v)

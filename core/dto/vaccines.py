"""Vaccine DTOs for data validation."""
from pydantic import BaseModel, Field, field_validator

from core.dto.base import MAX_INTEGER


class AddDosesDTO(BaseModel):
    """DTO for adding doses to the shared pool."""

    vaccine_name: str = Field(..., min_length=1, max_length=255, description="Vaccine name")
    doses: int = Field(..., gt=0, le=MAX_INTEGER, description="Number of doses to add")

    @field_validator('vaccine_name')
    @classmethod
    def validate_vaccine_name(cls, v: str) -> str:
        """Clean vaccine name."""
        v = v.strip()
        if not v:
            raise ValueError("Vaccine name is required")
        return v

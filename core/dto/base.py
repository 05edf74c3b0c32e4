"""Shared helpers for DTO validation."""
from datetime import date, datetime
from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from console.config import settings
from core.exceptions import InvalidDateError, ValidationError, WeakPasswordError

DTOType = TypeVar("DTOType", bound=BaseModel)

# Largest value an INTEGER column holds on every supported database
MAX_INTEGER = 2**31 - 1


def parse_iso_date(value: Any) -> date:
    """Parse YYYY-MM-DD strings; pass date objects through."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("date must be a YYYY-MM-DD string")
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def validate_dto(dto_class: Type[DTOType], **data: Any) -> DTOType:
    """
    Build a DTO, translating pydantic errors into application errors.

    Args:
        dto_class: DTO model class
        **data: Raw field values

    Returns:
        Validated DTO instance

    Raises:
        InvalidDateError: If a date field could not be parsed
        WeakPasswordError: If the password breaks the strength policy
        ValidationError: For any other invalid field
    """
    try:
        return dto_class(**data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else "value"
        if field == "slot_date":
            raise InvalidDateError(data.get(field)) from e
        if field == "password":
            raise WeakPasswordError(error.get("msg"), min_length=settings.password_min_length) from e
        raise ValidationError(field, error.get("msg")) from e

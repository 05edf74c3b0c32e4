"""Account DTOs for data validation."""
from pydantic import BaseModel, Field, field_validator

from core.security import password_problems
from core.session import Role


class CreateAccountDTO(BaseModel):
    """DTO for registering a patient or caregiver."""

    username: str = Field(..., min_length=1, max_length=255, description="Unique, case-sensitive username")
    password: str = Field(..., min_length=1, description="Plain password")
    role: Role = Field(..., description="patient or caregiver")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Usernames are single tokens."""
        if not v.strip() or any(ch.isspace() for ch in v):
            raise ValueError("Username must not contain whitespace")
        return v

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Enforce the password strength policy."""
        problems = password_problems(v)
        if problems:
            raise ValueError("; ".join(problems))
        return v


class LoginDTO(BaseModel):
    """DTO for logging in."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, description="Plain password")
    role: Role = Field(..., description="Role to log in as")

"""Pydantic schemas for user profile endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.validators import EmailAddress


class UserUpdate(BaseModel):
    """Schema for editing the caller's own profile. Omitted fields are unchanged."""

    email: EmailAddress | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v: str | None) -> str | None:
        """Email is the sign-in key, so it can be changed but not cleared."""
        if v is None:
            raise ValueError("Email cannot be null")
        return v


class UserResponse(BaseModel):
    """Response model for user info. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime

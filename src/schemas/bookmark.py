"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.validators import (
    validate_description_length,
    validate_link_length,
    validate_title_length,
)


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    There is no owner field: unknown keys (e.g. `user_id`) are
    ignored and the owner is always the authenticated caller.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1)
    description: str | None = None
    link: str = Field(..., min_length=1)

    @field_validator("title")
    @classmethod
    def check_title_length(cls, v: str) -> str:
        """Validate title length."""
        return validate_title_length(v)

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Validate description length."""
        return validate_description_length(v)

    @field_validator("link")
    @classmethod
    def check_link_length(cls, v: str) -> str:
        """Validate link length."""
        return validate_link_length(v)


class BookmarkUpdate(BaseModel):
    """
    Schema for partially updating an existing bookmark.

    Only fields present in the request body are applied. Ownership cannot be
    changed: unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    link: str | None = Field(default=None, min_length=1)

    @field_validator("title", "link")
    @classmethod
    def reject_null(cls, v: str | None) -> str | None:
        """Title and link are required on a bookmark, so they cannot be cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def check_title_length(cls, v: str | None) -> str | None:
        """Validate title length."""
        return validate_title_length(v)

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Validate description length."""
        return validate_description_length(v)

    @field_validator("link")
    @classmethod
    def check_link_length(cls, v: str | None) -> str | None:
        """Validate link length."""
        return validate_link_length(v)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime

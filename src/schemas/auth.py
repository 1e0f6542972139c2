"""Pydantic schemas for signup and signin endpoints."""
from pydantic import BaseModel, Field

from schemas.validators import EmailAddress


class AuthRequest(BaseModel):
    """Credentials submitted to sign in."""

    email: EmailAddress
    password: str = Field(..., min_length=1, max_length=1024)


class SignupRequest(AuthRequest):
    """Credentials and optional display name submitted to register."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class AccessTokenResponse(BaseModel):
    """Bearer token returned after a successful signup or signin."""

    access_token: str
    token_type: str = "bearer"

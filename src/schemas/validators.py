"""
Shared validation functions for Pydantic schemas.

Length limits come from settings so they can be tuned per deployment.
"""
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator

from core.config import get_settings


def validate_email_syntax(email: str) -> str:
    """
    Check that `email` is a syntactically valid address and return it unchanged.

    The caller's spelling is kept as-is (no domain lowercasing or unicode
    normalization) because emails are matched exactly as stored.
    """
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}") from e
    return email


EmailAddress = Annotated[str, AfterValidator(validate_email_syntax)]


def validate_title_length(title: str | None) -> str | None:
    """Validate that title doesn't exceed maximum length."""
    settings = get_settings()
    if title is not None and len(title) > settings.max_title_length:
        raise ValueError(
            f"Title exceeds maximum length of {settings.max_title_length:,} characters "
            f"(got {len(title):,} characters).",
        )
    return title


def validate_description_length(description: str | None) -> str | None:
    """Validate that description doesn't exceed maximum length."""
    settings = get_settings()
    if description is not None and len(description) > settings.max_description_length:
        max_len = settings.max_description_length
        raise ValueError(
            f"Description exceeds maximum length of {max_len:,} characters "
            f"(got {len(description):,} characters).",
        )
    return description


def validate_link_length(link: str | None) -> str | None:
    """Validate that link doesn't exceed maximum length."""
    settings = get_settings()
    if link is not None and len(link) > settings.max_link_length:
        raise ValueError(
            f"Link exceeds maximum length of {settings.max_link_length:,} characters "
            f"(got {len(link):,} characters).",
        )
    return link

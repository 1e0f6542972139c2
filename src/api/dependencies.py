"""FastAPI dependencies for injection."""
from fastapi import Depends

from core.auth import CurrentUser, get_current_user, get_token_issuer
from core.config import get_settings
from core.tokens import TokenIssuer
from db.session import get_async_session
from services.account_service import AccountService


def get_account_service(
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AccountService:
    """Dependency that builds the account service around the configured token issuer."""
    return AccountService(token_issuer)


__all__ = [
    "CurrentUser",
    "get_account_service",
    "get_async_session",
    "get_current_user",
    "get_settings",
    "get_token_issuer",
]

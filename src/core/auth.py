"""
Request authentication: resolve the calling identity from a bearer token.

Protected routes depend on `get_current_user`. The dependency is a pure check
over the token itself and performs no database lookups, so a modified account
keeps authenticating with the claims it was issued until the token expires.
"""
import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings
from core.tokens import TokenError, TokenExpiredError, TokenIssuer

logger = logging.getLogger(__name__)


# HTTP Bearer token scheme. auto_error=False so missing credentials produce our
# uniform 401 instead of FastAPI's default 403.
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller resolved from a verified access token."""

    id: int
    email: str


def _unauthenticated() -> HTTPException:
    """Build the uniform 401 response; it never says which check failed."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    """Dependency that builds a token issuer from the configured signing secret."""
    return TokenIssuer(settings.jwt_secret.get_secret_value())


def resolve_caller(
    credentials: HTTPAuthorizationCredentials | None,
    token_issuer: TokenIssuer,
) -> CurrentUser:
    """
    Verify bearer credentials and return the resolved caller.

    Raises:
        HTTPException: 401 if credentials are missing or the token fails verification.
    """
    if credentials is None:
        raise _unauthenticated()

    try:
        claims = token_issuer.verify(credentials.credentials)
    except TokenExpiredError:
        logger.info("Rejected expired access token")
        raise _unauthenticated()
    except TokenError as e:
        # Log the reason server-side only
        logger.warning("Access token verification failed: %s", e)
        raise _unauthenticated()

    return CurrentUser(id=claims.user_id, email=claims.email)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> CurrentUser:
    """Dependency that validates the bearer token and returns the current caller."""
    return resolve_caller(credentials, token_issuer)

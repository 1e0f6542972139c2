"""Issuing and verifying signed access tokens (JWT, HS256)."""
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

ACCESS_TOKEN_LIFETIME = timedelta(minutes=15)
DEFAULT_ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class TokenError(Exception):
    """Base class for access token verification failures."""


class TokenSignatureError(TokenError):
    """Raised when the token signature does not match the signing secret."""


class TokenExpiredError(TokenError):
    """Raised when the token is past its expiry."""


class TokenMalformedError(TokenError):
    """Raised when the token cannot be decoded or its claims are invalid."""


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a verified access token."""

    user_id: int
    email: str


class TokenIssuer:
    """
    Issues and verifies self-contained access tokens.

    The signing secret is passed in explicitly so the issuer can be constructed
    in isolation (tests, scripts) without touching application settings.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        lifetime: timedelta = ACCESS_TOKEN_LIFETIME,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime

    @property
    def lifetime(self) -> timedelta:
        """How long an issued token stays valid."""
        return self._lifetime

    def issue(self, user_id: int, email: str, issued_at: datetime | None = None) -> str:
        """
        Create a signed token for the given identity.

        Args:
            user_id: Identity id, stored in the `sub` claim.
            email: Identity email, stored in the `email` claim.
            issued_at: Issuance time. Defaults to now; expiry is issued_at + lifetime.

        Returns:
            The encoded token.
        """
        now = issued_at or datetime.now(UTC)
        payload = {
            # RFC 7519 requires `sub` to be a string
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry and return its identity claims.

        Only the configured algorithm is accepted, so tokens signed with `none` or
        with a different algorithm are rejected.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenSignatureError: If the signature is invalid (e.g., wrong secret).
            TokenMalformedError: If the token is undecodable or its claims are invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError("Token signature is invalid") from e
        except jwt.PyJWTError as e:
            raise TokenMalformedError(f"Token is malformed: {e}") from e

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise TokenMalformedError("Token subject is not a valid identity id") from e

        email = payload["email"]
        if not isinstance(email, str):
            raise TokenMalformedError("Token email claim is not a string")

        return TokenClaims(user_id=user_id, email=email)

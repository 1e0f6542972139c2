"""Tests for access token issuing and verification."""
from datetime import UTC, datetime, timedelta

import jwt
import pytest
from jwt.utils import base64url_encode

from core.tokens import (
    ACCESS_TOKEN_LIFETIME,
    TokenClaims,
    TokenExpiredError,
    TokenIssuer,
    TokenMalformedError,
    TokenSignatureError,
)

SECRET = "unit-test-signing-secret-abcdefghijklmnop"
OTHER_SECRET = "another-signing-secret-abcdefghijklmnopq"


@pytest.fixture
def issuer() -> TokenIssuer:
    """Token issuer with a fixed test secret."""
    return TokenIssuer(SECRET)


class TestIssue:
    """Tests for TokenIssuer.issue."""

    def test__issue__payload_contains_identity_claims(self, issuer: TokenIssuer) -> None:
        """The token carries the subject id and email."""
        token = issuer.issue(42, "user@example.com")
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert payload["sub"] == "42"
        assert payload["email"] == "user@example.com"

    def test__issue__expires_fifteen_minutes_after_issuance(self, issuer: TokenIssuer) -> None:
        """Expiry is fixed at 15 minutes from issued-at."""
        token = issuer.issue(42, "user@example.com")
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert ACCESS_TOKEN_LIFETIME == timedelta(minutes=15)
        assert payload["exp"] - payload["iat"] == 15 * 60

    def test__issue__uses_hs256(self, issuer: TokenIssuer) -> None:
        """Tokens are signed with HS256."""
        token = issuer.issue(1, "user@example.com")
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test__init__rejects_empty_secret(self) -> None:
        """An issuer cannot be built without a signing secret."""
        with pytest.raises(ValueError, match="secret"):
            TokenIssuer("")


class TestVerify:
    """Tests for TokenIssuer.verify."""

    def test__verify__returns_claims_for_valid_token(self, issuer: TokenIssuer) -> None:
        """A freshly issued token verifies to the same identity."""
        token = issuer.issue(7, "seven@example.com")

        assert issuer.verify(token) == TokenClaims(user_id=7, email="seven@example.com")

    def test__verify__rejects_expired_token(self, issuer: TokenIssuer) -> None:
        """A token issued more than 15 minutes ago is expired."""
        issued_at = datetime.now(UTC) - timedelta(minutes=16)
        token = issuer.issue(7, "seven@example.com", issued_at=issued_at)

        with pytest.raises(TokenExpiredError):
            issuer.verify(token)

    def test__verify__accepts_token_just_before_expiry(self, issuer: TokenIssuer) -> None:
        """A token issued 14 minutes ago is still valid."""
        issued_at = datetime.now(UTC) - timedelta(minutes=14)
        token = issuer.issue(7, "seven@example.com", issued_at=issued_at)

        assert issuer.verify(token).user_id == 7

    def test__verify__rejects_token_signed_with_other_secret(self, issuer: TokenIssuer) -> None:
        """A token signed with a different secret fails signature verification."""
        token = TokenIssuer(OTHER_SECRET).issue(7, "seven@example.com")

        with pytest.raises(TokenSignatureError):
            issuer.verify(token)

    def test__verify__rejects_tampered_payload(self, issuer: TokenIssuer) -> None:
        """Changing the payload invalidates the signature."""
        header, _, signature = issuer.issue(7, "seven@example.com").split(".")
        forged_payload = base64url_encode(
            b'{"sub":"8","email":"eight@example.com","iat":1,"exp":9999999999}',
        ).decode()

        with pytest.raises(TokenSignatureError):
            issuer.verify(f"{header}.{forged_payload}.{signature}")

    def test__verify__rejects_other_algorithm(self, issuer: TokenIssuer) -> None:
        """A token signed with the right secret but a different algorithm is rejected."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "7", "email": "seven@example.com", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS512",
        )

        with pytest.raises(TokenMalformedError):
            issuer.verify(token)

    def test__verify__rejects_unsigned_token(self, issuer: TokenIssuer) -> None:
        """Tokens using the `none` algorithm are never accepted."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "7", "email": "seven@example.com", "iat": now, "exp": now + timedelta(minutes=5)},
            None,
            algorithm="none",
        )

        with pytest.raises(TokenMalformedError):
            issuer.verify(token)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
    def test__verify__rejects_garbage(self, issuer: TokenIssuer, token: str) -> None:
        """Undecodable strings are malformed tokens."""
        with pytest.raises(TokenMalformedError):
            issuer.verify(token)

    def test__verify__rejects_token_without_expiry(self, issuer: TokenIssuer) -> None:
        """A validly signed token without `exp` is malformed."""
        token = jwt.encode(
            {"sub": "7", "email": "seven@example.com", "iat": datetime.now(UTC)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenMalformedError):
            issuer.verify(token)

    def test__verify__rejects_non_numeric_subject(self, issuer: TokenIssuer) -> None:
        """A subject that is not an identity id is malformed."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "auth0|abc", "email": "x@example.com", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenMalformedError):
            issuer.verify(token)

"""Service layer for account signup and signin."""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.passwords import hash_password, verify_password
from core.tokens import TokenIssuer
from models.user import User
from services.exceptions import CredentialsIncorrectError, CredentialsTakenError

logger = logging.getLogger(__name__)


# Verified when the email is unknown so both signin failures cost one argon2 verify.
# Computed once at import; requests never hash on the event loop.
DUMMY_PASSWORD_HASH = hash_password("dummy-password-for-timing-equalization")


class AccountService:
    """
    Signup and signin.

    Both flows return an access token from the injected `TokenIssuer`, which
    owns the signing secret. Password hashing runs in a worker thread because
    argon2 is CPU and memory heavy and would otherwise block the event loop.
    """

    def __init__(self, token_issuer: TokenIssuer) -> None:
        self.token_issuer = token_issuer

    async def signup(
        self,
        db: AsyncSession,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> str:
        """
        Register a new account and return an access token for it.

        Raises:
            CredentialsTakenError: If the account cannot be created (e.g., the email
                is already registered). The error does not say which field collided.

        Note: Does not commit. Caller (session generator) handles commit at request end.
        """
        password_hash = await asyncio.to_thread(hash_password, password)

        user = User(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        db.add(user)
        try:
            await db.flush()
        except IntegrityError as e:
            logger.info("Signup rejected: account constraint violated")
            raise CredentialsTakenError() from e

        logger.info("Account created: user_id=%s", user.id)
        return self.token_issuer.issue(user.id, user.email)

    async def signin(self, db: AsyncSession, email: str, password: str) -> str:
        """
        Authenticate with email and password and return an access token.

        Raises:
            CredentialsIncorrectError: If the email is unknown or the password is
                wrong. Both cases raise the same error.
            PasswordHashError: If the stored hash is malformed (internal fault).
        """
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if user is None:
            await asyncio.to_thread(verify_password, DUMMY_PASSWORD_HASH, password)
            raise CredentialsIncorrectError()

        matches = await asyncio.to_thread(verify_password, user.password_hash, password)
        if not matches:
            logger.info("Signin rejected: wrong password for user_id=%s", user.id)
            raise CredentialsIncorrectError()

        return self.token_issuer.issue(user.id, user.email)

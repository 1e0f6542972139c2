"""Password hashing and verification (argon2id)."""
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

# Library defaults follow the RFC 9106 low-memory profile (argon2id).
_hasher = PasswordHasher()


class PasswordHashError(Exception):
    """
    Raised when a stored password hash cannot be used for verification.

    This signals data corruption (or a hash produced by another scheme), which
    must not be confused with a user typing the wrong password.
    """

    def __init__(self, message: str = "Stored password hash is malformed") -> None:
        super().__init__(message)


def hash_password(plaintext: str) -> str:
    """
    Hash a plaintext password.

    The returned string is in PHC format and embeds the algorithm parameters and
    a random salt, so hashing the same password twice yields different values.
    """
    return _hasher.hash(plaintext)


def verify_password(password_hash: str, plaintext: str) -> bool:
    """
    Verify a plaintext password against a stored hash.

    Returns:
        True if the password matches, False if it does not.

    Raises:
        PasswordHashError: If the stored hash is malformed or cannot be verified.
    """
    try:
        return _hasher.verify(password_hash, plaintext)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError) as e:
        raise PasswordHashError() from e

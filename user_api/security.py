"""Password hashing utilities."""

import bcrypt

from user_api.config import settings


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Raises:
        ValueError: bcrypt rejected the credential, e.g. one longer than 72 bytes.
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))

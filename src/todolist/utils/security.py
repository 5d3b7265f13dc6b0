"""Password hashing helpers."""
from functools import lru_cache

from passlib.context import CryptContext

from todolist.config.settings import get_settings


@lru_cache()
def get_password_context() -> CryptContext:
    """Get the cached passlib context built from settings."""
    return CryptContext(schemes=get_settings().PASSWORD_SCHEMES, deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a password for storage.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return get_password_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its stored hash.

    Args:
        plain_password: Password to verify
        hashed_password: Stored password hash

    Returns:
        True if password matches, False otherwise
    """
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash any configured scheme recognises
        return False

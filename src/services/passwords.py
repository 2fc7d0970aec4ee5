"""Password hashing and verification."""

import logging
from functools import lru_cache

from passlib.context import CryptContext

from src.services.errors import HashingError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        logger.error(f"Error hashing password: {e}")
        raise HashingError("Password hashing failed") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    A mismatch returns False; only a malformed hash raises.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Error verifying password: {e}")
        raise HashingError("Password verification failed") from e


@lru_cache
def dummy_hash() -> str:
    """Hash checked when an email is unknown, so sign-in takes the same time
    whether or not the account exists. Built on first use, after logging is set up.
    """
    return hash_password("timing-equalization-placeholder")

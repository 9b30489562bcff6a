"""Password hashing with bcrypt."""

import logging

import bcrypt

from domain.model.errors import HashingError

logger = logging.getLogger(__name__)

# 2^12 iterations
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt.

    Raises:
        HashingError: the bcrypt primitive rejected the input or failed
    """
    try:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        logger.error("Password hashing failed", extra={"error": type(e).__name__})
        raise HashingError("Failed to hash password") from e


def verify_password(plain: str, hashed: str) -> bool:
    """Return True only if ``plain`` produced ``hashed``."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored hash is not a valid bcrypt string
        logger.warning("Stored password hash could not be parsed")
        return False

"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.errors import HashingError

if TYPE_CHECKING:
    from app.schemas.auth import UserPublic

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    try:
        salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        logger.error("Error hashing the password: %s", e)
        raise HashingError("Error hashing password") from e


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """
    Hash at the configured cost for sign-ins with an unknown email.

    Checking against it makes that path cost one bcrypt round, same as a wrong password.
    """
    return hash_password("dummy-password-for-unknown-accounts")


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash.

    Returns False on mismatch; raises HashingError if the stored hash is unusable.
    """
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Error comparing password: %s", e)
        raise HashingError("Error validating password") from e


def create_access_token(user: "UserPublic") -> str:
    """Create a JWT session token carrying id, email, role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (id, email, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )

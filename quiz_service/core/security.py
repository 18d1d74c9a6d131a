"""Password hashing and JWT bearer tokens for quiz takers."""

from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from quiz_service.config import settings

# bcrypt silently ignores anything past 72 bytes
BCRYPT_MAX_BYTES = 72


# ── Password hashing ──────────────────────────────────────────────────────────


def hash_password(plain: str) -> str:
    """Return the bcrypt hash of *plain*.

    Raises:
        ValueError: if the encoded password exceeds bcrypt's 72-byte limit.
    """
    encoded = plain.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(
            f"Password is {len(encoded)} bytes, but bcrypt has a "
            f"{BCRYPT_MAX_BYTES}-byte limit. Please use a shorter password."
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


# ── JWT tokens ────────────────────────────────────────────────────────────────


def create_access_token(
    user_id: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Signed token whose ``sub`` claim is the user id attempts are filed under."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": user_id, "email": email, "exp": expire}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT. Returns payload dict or None on failure."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

"""
Password hashing and access tokens.

Dependencies: bcrypt, PyJWT
System role: Credential primitives for the auth service
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

from podcast_analytics.configs.auth import AuthSettings
from podcast_analytics.core.exceptions import AuthenticationError


def hash_password(password: str) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password

    Returns:
        str: bcrypt hash (utf-8 decoded)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Args:
        password: Plaintext candidate
        password_hash: Stored hash

    Returns:
        bool: True if they match
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(user_id: UUID, settings: AuthSettings) -> str:
    """
    Sign an access token for a user.

    Args:
        user_id: User primary key
        settings: Auth settings (secret, algorithm, lifetime)

    Returns:
        str: Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        "id": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=settings.expire_days),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> str:
    """
    Verify a token and return the user ID it was issued for.

    Args:
        token: Encoded JWT
        settings: Auth settings

    Returns:
        str: User ID claim

    Raises:
        AuthenticationError: If the token is expired, tampered with, or lacks an id
    """
    try:
        payload = jwt.decode(token, settings.secret, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        raise AuthenticationError(
            "Not authorized to access this route",
            {"reason": type(e).__name__},
        ) from e

    user_id = payload.get("id")
    if not user_id:
        raise AuthenticationError("Not authorized to access this route")
    return user_id

"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from jose import jwt
from passlib.hash import pbkdf2_sha256

from socialnet.config import Settings, get_settings

# Injected into the services; maps a plaintext password to its stored hash
PasswordEncryptor = Callable[[str], str]


def make_encryptor(settings: Optional[Settings] = None) -> PasswordEncryptor:
    """
    Build the password hash function used for registration and login.

    The PBKDF2 handler is pinned to the configured salt and rounds, so the
    same plaintext always yields the same hash and logins can match the
    stored value directly in a query.

    Args:
        settings: Settings to read salt and rounds from (defaults to cached settings)

    Returns:
        Callable mapping a plaintext password to its hash
    """
    settings = settings or get_settings()
    handler = pbkdf2_sha256.using(
        salt=settings.password_salt.encode("utf-8"),
        rounds=settings.password_rounds,
    )

    def encrypt(plain_password: str) -> str:
        return handler.hash(plain_password)

    return encrypt


def create_access_token(
    email: str,
    expires_delta: timedelta | None = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Create a JWT access token identifying the logged-in user.

    Args:
        email: Email of the authenticated user (token subject)
        expires_delta: Optional custom expiration time
        settings: Settings to sign with (defaults to cached settings)

    Returns:
        Encoded JWT token string
    """
    settings = settings or get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    expire = datetime.now(timezone.utc) + expires_delta

    payload = {
        "sub": email,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: Optional[Settings] = None) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = settings or get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )

"""
JWT utility functions for session token generation and validation
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import TokenExpiredException, TokenInvalidException


def create_access_token(admin_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed session token for an administrator

    Args:
        admin_id: Administrator's ID
        expires_delta: Lifetime override, defaults to JWT_EXPIRATION_HOURS

    Returns:
        str: Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta if expires_delta is not None else timedelta(hours=settings.JWT_EXPIRATION_HOURS)
    payload = {
        "sub": str(admin_id),
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }

    token = jwt.encode(
        payload,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )
    return token


def verify_token(token: str) -> dict:
    """
    Verify and decode JWT token

    Args:
        token: JWT token to verify

    Returns:
        dict: Decoded token payload, `sub` holds the administrator ID

    Raises:
        TokenExpiredException: If the token is past its expiry
        TokenInvalidException: If the token is malformed or badly signed
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredException()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidException(f"Invalid token: {str(e)}")

    if not payload.get("sub"):
        raise TokenInvalidException("Invalid token: missing subject")
    return payload

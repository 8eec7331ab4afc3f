"""Signed bearer credentials.

Tokens are HS256 JWTs carrying the user ID in ``sub`` and the role in a
``role`` claim. They expire after ``AuthSettings.jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from agora.config import AuthSettings
from agora.util.error import JWTError

REQUIRED_CLAIMS = ["sub", "role", "exp"]


class TokenPayload(BaseModel):
    """Claims extracted from a verified token."""

    user_id: int
    role: str
    exp: datetime


def create_token(user_id: int, role: str, settings: AuthSettings) -> str:
    """Sign a token for the given user.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        role: User role claim
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then read the claims.

    Raises:
        JWTError: If the token is malformed, forged or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(
            user_id=claims["sub"], role=claims["role"], exp=claims["exp"]
        )
    except ValidationError as e:
        raise JWTError("Invalid token") from e

"""JWT token utilities for the operator session."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from miniblog.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(settings: AuthSettings, name: str | None = None) -> str:
    """Create an operator JWT token.

    Args:
        settings: Authentication settings
        name: Subject written into the token, defaults to the operator name

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": name or settings.operator_name,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

"""
Access tokens.

Tokens are HS256 JWTs. ``sub`` holds the user id and ``email`` rides along
as a convenience claim; nothing else about the user is trusted from a token.
"""

from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional
from uuid import UUID
from jose import JWTError, jwt
from pydantic_settings import BaseSettings


class JWTSettings(BaseSettings):
    """Token signing settings, read from SECRET_KEY, ALGORITHM, ..."""

    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60

    class Config:
        env_file = ".env"
        extra = "ignore"


jwt_settings = JWTSettings()


class TokenSubject(NamedTuple):
    """Who a verified token was issued to."""

    user_id: UUID
    email: Optional[str]


def create_access_token(
    user_id: UUID,
    email: Optional[str] = None,
    expires_in: Optional[timedelta] = None,
) -> str:
    """
    Issue a signed access token.

    Args:
        user_id: Subject of the token
        email: Optional email claim
        expires_in: Lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_in or timedelta(minutes=jwt_settings.access_token_expire_minutes)

    claims = {"sub": str(user_id), "iat": issued_at, "exp": issued_at + lifetime}
    if email:
        claims["email"] = email

    return jwt.encode(claims, jwt_settings.secret_key, algorithm=jwt_settings.algorithm)


def read_access_token(token: str) -> Optional[TokenSubject]:
    """
    Verify a token's signature and expiry.

    Returns:
        TokenSubject, or None when the token is malformed, forged, expired
        or has no usable subject
    """
    try:
        claims = jwt.decode(
            token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm]
        )
        return TokenSubject(UUID(claims["sub"]), claims.get("email"))
    except (JWTError, KeyError, TypeError, ValueError):
        return None

"""
Bearer-token dependencies for protected routes.
"""

from typing import Optional
from uuid import UUID
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.utils.jwt import TokenSubject, read_access_token

# Missing or non-Bearer headers come through as None and are answered below
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenSubject:
    """
    Resolve the Authorization header to a verified token subject.

    Raises:
        HTTPException: 401 when the header is absent or the token is not valid
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    subject = read_access_token(credentials.credentials)
    if subject is None:
        raise _unauthorized("Invalid or expired token")

    return subject


def get_current_user_id(subject: TokenSubject = Depends(get_token_subject)) -> UUID:
    """Id of the authenticated caller."""
    return subject.user_id

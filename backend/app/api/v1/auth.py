"""
Authentication endpoints: register and login.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field
from sqlalchemy.orm import Session

from app.api.v1.base import CamelModel
from app.db.database import get_db
from app.services.auth_service import AuthService

router = APIRouter()


class RegisterRequest(CamelModel):
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=8, max_length=72)
    name: str = Field(..., min_length=1, max_length=100)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    """Public part of a user; the password hash never leaves the server."""

    id: UUID
    email: str
    name: str


class AuthResponse(CamelModel):
    token: str
    user: UserResponse


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new account.

    Duplicate emails are rejected with 400.
    """
    user, token = AuthService(db).register(request.email, request.password, request.name)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse, status_code=status.HTTP_200_OK)
async def login(request: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a token; 401 on bad credentials."""
    user, token = AuthService(db).login(request.email, request.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))

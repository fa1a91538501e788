"""
Account registration and login.
"""

import logging
from typing import Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.user import User
from app.services.exceptions import DuplicateEmailError, InvalidCredentialsError
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Creates accounts and exchanges credentials for access tokens."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, email: str, password: str, name: str) -> Tuple[User, str]:
        """
        Create an account and issue its first token.

        Returns:
            (user, token)

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        if self.db.query(User).filter(User.email == email).first():
            logger.warning(f"[REGISTER] Email already registered: {email}")
            raise DuplicateEmailError()

        user = User(email=email, name=name, password_hash=hash_password(password))
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # Same email registered between the check and the insert
            self.db.rollback()
            logger.warning(f"[REGISTER] Email already registered: {email}")
            raise DuplicateEmailError()
        self.db.refresh(user)

        logger.info(f"[REGISTER] Created user {user.id}")
        return user, create_access_token(user.id, user.email)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = self.db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"[LOGIN] Rejected login for {email}")
            raise InvalidCredentialsError()

        return user, create_access_token(user.id, user.email)

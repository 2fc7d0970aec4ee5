"""Authentication service for sign-up and sign-in."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.enums import Role
from src.models.user import User
from src.schemas.user import UserResponse
from src.services.errors import DuplicateEmailError, InvalidCredentialsError
from src.services.passwords import dummy_hash, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Service for creating and authenticating user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def sign_up(
        self,
        email: str,
        password: str,
        name: str | None = None,
        role: str = Role.USER.value,
    ) -> UserResponse:
        """Create a new user, refusing emails that are already registered."""
        if self.get_user_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(email=email, password_hash=hash_password(password), name=name, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent sign-up for the same email
            self.db.rollback()
            raise DuplicateEmailError(email) from e
        self.db.refresh(user)

        logger.info(f"User {user.email} created successfully")
        return UserResponse.model_validate(user)

    def sign_in(self, email: str, password: str) -> UserResponse:
        """Authenticate a user by email and password."""
        user = self.get_user_by_email(email)
        if user is None:
            verify_password(password, dummy_hash())
            raise InvalidCredentialsError()
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info(f"User {user.email} signed in successfully")
        return UserResponse.model_validate(user)

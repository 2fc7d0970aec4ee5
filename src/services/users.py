"""User repository: CRUD over the users table returning projected views."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.user import UserResponse
from src.services.errors import (
    DeleteFailedError,
    DuplicateEmailError,
    NotFoundError,
    UpdateFailedError,
)
from src.services.passwords import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """Service for reading and mutating user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[UserResponse]:
        """Get all users in id order."""
        users = self.db.query(User).order_by(User.id).all()
        return [UserResponse.model_validate(user) for user in users]

    def get_user(self, user_id: int) -> UserResponse:
        """Get a single user or raise NotFoundError."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            logger.info(f"User {user_id} not found")
            raise NotFoundError(user_id)
        return UserResponse.model_validate(user)

    def update_user(self, user_id: int, updates: dict[str, Any]) -> UserResponse:
        """
        Apply a partial update to a user.

        Only keys present in ``updates`` are written. The existence check and
        the write are separate statements; a delete landing between them is
        reported as UpdateFailedError.
        """
        self.get_user(user_id)

        values = dict(updates)
        if "password" in values:
            values["password_hash"] = hash_password(values.pop("password"))
        values["updated_at"] = datetime.now(UTC)

        try:
            rowcount = (
                self.db.query(User)
                .filter(User.id == user_id)
                .update(values, synchronize_session=False)
            )
            if rowcount == 0:
                self.db.rollback()
                raise UpdateFailedError(user_id)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmailError(values.get("email", "")) from e

        return self.get_user(user_id)

    def delete_user(self, user_id: int) -> int:
        """Delete a user and return the removed id."""
        self.get_user(user_id)

        rowcount = (
            self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        )
        if rowcount == 0:
            self.db.rollback()
            raise DeleteFailedError(user_id)
        self.db.commit()

        logger.info(f"User {user_id} deleted")
        return user_id

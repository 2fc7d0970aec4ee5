"""User model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.enums import Role
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User account with a hashed password and a role."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(256), nullable=True)
    email = Column(String(256), unique=True, nullable=False, index=True)
    # Column keeps the historical name; only bcrypt hashes are stored in it
    password_hash = Column("password", String(256), nullable=False)
    role = Column(String(50), nullable=False, default=Role.USER.value, server_default=Role.USER.value)

"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Roles a user account can hold."""

    USER = "user"
    ADMIN = "admin"

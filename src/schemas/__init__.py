"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Actor, SignInRequest, SignUpRequest
from src.schemas.user import UserIdParams, UserResponse, UserUpdate
from src.schemas.validation import RequestValidationFailed, parse

__all__ = [
    "Actor",
    "SignUpRequest",
    "SignInRequest",
    "UserIdParams",
    "UserUpdate",
    "UserResponse",
    "RequestValidationFailed",
    "parse",
]

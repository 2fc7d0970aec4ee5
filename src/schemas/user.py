"""User schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)

from src.models.enums import Role

EMAIL_MAX_LENGTH = 255
# bcrypt only hashes the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72
# users.id is a 32-bit integer column
MAX_USER_ID = 2_147_483_647


def normalize_email(value: Any) -> Any:
    """Trim and lowercase an email before format validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


def check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


Email = Annotated[EmailStr, BeforeValidator(normalize_email), AfterValidator(check_email_length)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]
Password = Annotated[str, StringConstraints(min_length=6), AfterValidator(check_password_bytes)]


class UserIdParams(BaseModel):
    """Path parameters identifying a user."""

    id: int = Field(..., gt=0, le=MAX_USER_ID)


class UserUpdate(BaseModel):
    """Partial update of a user; only supplied fields change."""

    model_config = ConfigDict(use_enum_values=True)

    name: Name | None = None
    email: Email | None = None
    password: Password | None = None
    role: Role | None = None

    @field_validator("email", "password", "role", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        """Required columns may be omitted but not set to null."""
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @model_validator(mode="after")
    def check_fields(self) -> "UserUpdate":
        """Require at least one field."""
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class UserResponse(BaseModel):
    """Projected view of a user; never carries the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

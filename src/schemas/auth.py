"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import Role
from src.schemas.user import Email, Name, Password


class SignUpRequest(BaseModel):
    """User registration request."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    name: Name
    email: Email
    password: Password
    role: Role = Role.USER


class SignInRequest(BaseModel):
    """User sign-in request."""

    email: Email
    password: str = Field(..., min_length=1)


class Actor(BaseModel):
    """Authenticated identity carried by a request's token."""

    id: int
    email: str | None = None
    role: str

    @property
    def is_admin(self) -> bool:
        """Check if the actor holds the admin role."""
        return self.role == Role.ADMIN.value

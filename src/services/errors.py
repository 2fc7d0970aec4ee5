"""Typed service errors.

Callers discriminate failures by exception type or by ``kind``, never by
message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure a service can report."""

    NOT_FOUND = "not_found"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    UPDATE_FAILED = "update_failed"
    DELETE_FAILED = "delete_failed"
    HASHING = "hashing"
    SIGNING = "signing"
    VERIFICATION = "verification"


class ServiceError(Exception):
    """Base class for errors raised below the API layer."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id


class DuplicateEmailError(ServiceError):
    kind = ErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


class InvalidCredentialsError(ServiceError):
    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self):
        super().__init__("Invalid email or password")


class UpdateFailedError(ServiceError):
    kind = ErrorKind.UPDATE_FAILED

    def __init__(self, user_id: int):
        super().__init__(f"Failed to update user with ID {user_id}")
        self.user_id = user_id


class DeleteFailedError(ServiceError):
    kind = ErrorKind.DELETE_FAILED

    def __init__(self, user_id: int):
        super().__init__(f"Failed to delete user with ID {user_id}")
        self.user_id = user_id


class HashingError(ServiceError):
    kind = ErrorKind.HASHING


class SigningError(ServiceError):
    kind = ErrorKind.SIGNING


class VerificationError(ServiceError):
    kind = ErrorKind.VERIFICATION

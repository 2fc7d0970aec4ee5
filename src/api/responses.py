"""Error envelopes shared by the path operations."""

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(
    status_code: int,
    error: str,
    message: str | None = None,
    details: list[dict[str, str]] | None = None,
) -> JSONResponse:
    """Build a ``{error, message|details}`` response."""
    content: dict = {"error": error}
    if details is not None:
        content["details"] = details
    if message is not None:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=content)


def validation_failed(details: list[dict[str, str]]) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", details=details)


def unauthorized() -> JSONResponse:
    return error_response(
        status.HTTP_401_UNAUTHORIZED, "Unauthorized", message="Authentication required"
    )


def forbidden(message: str) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, "Forbidden", message=message)


def user_not_found(message: str) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "User not found", message=message)


def internal_error() -> JSONResponse:
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        message="Something went wrong",
    )


def email_exists(message: str) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, "Email already exists", message=message)

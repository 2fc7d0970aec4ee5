"""Cookie handling with fixed security attributes."""

from typing import Any

from fastapi import Request, Response

TOKEN_COOKIE = "token"


class CookieAdapter:
    """Sets, clears and reads cookies on the request/response surface."""

    def __init__(self, secure: bool, max_age: int = 15 * 60):
        self.secure = secure
        self.max_age = max_age

    def get_options(self) -> dict[str, Any]:
        """Attributes applied to every cookie this adapter writes."""
        return {
            "httponly": True,
            "secure": self.secure,
            "samesite": "strict",
            "max_age": self.max_age,
        }

    def set(self, response: Response, name: str, value: str, **overrides: Any) -> None:
        """Set a cookie on the response."""
        response.set_cookie(name, value, **{**self.get_options(), **overrides})

    def clear(self, response: Response, name: str, **overrides: Any) -> None:
        """Expire a cookie on the client."""
        options = {**self.get_options(), **overrides}
        options.pop("max_age", None)
        response.delete_cookie(name, **options)

    def get(self, request: Request, name: str) -> str | None:
        """Read a cookie; None when the client did not send it."""
        return request.cookies.get(name)

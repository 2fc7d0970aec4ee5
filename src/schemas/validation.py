"""Framework-independent evaluation of request schemas."""

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestValidationFailed(Exception):
    """Input did not match its schema; ``details`` lists each violation."""

    def __init__(self, details: list[dict[str, str]]):
        super().__init__("Validation failed")
        self.details = details


def format_validation_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs."""
    details = []
    for err in errors:
        field = ".".join(str(part) for part in err["loc"]) or "body"
        details.append({"field": field, "message": err["msg"]})
    return details


def parse(schema: type[ModelT], data: Any) -> ModelT:
    """Evaluate ``data`` against ``schema``, returning the typed value."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationFailed(format_validation_errors(e.errors())) from e

"""
API error taxonomy.

Guards raise these to stop a request; entity operations wrap them in a
failed `Result` (see `core/envelope.py`). `main.py` turns either into JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(
        self,
        error: str | None = None,
        *,
        details: Any = None,
        validation: list[FieldError] | None = None,
        status_code: int | None = None,
    ) -> None:
        self.error = error or self.default_message
        # Internal detail, logged but never serialized.
        self.details = details
        self.validation = list(validation or [])
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.error)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.validation:
            body["validation"] = [v.to_dict() for v in self.validation]
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation error"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class QueryError(ApiError):
    status_code = 500
    default_message = "Query failed"


class ServerFault(ApiError):
    status_code = 500
    default_message = "Internal server error"

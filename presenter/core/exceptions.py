from typing import Any

from fastapi import status


class PresenterError(Exception):
    """Base error raised by the presenter layer itself.

    Failures raised by a wrapped model are never converted into this type;
    they reach the caller exactly as the model raised them.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRESENTER_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


class InvalidArgumentError(PresenterError, ValueError):
    """A presenter was handed no model, or a paginator it cannot render.

    ``details["missing"]`` lists absent paginator fields; ``details["error"]``
    carries the type or validation failure for fields that are present but
    unusable.
    """

    def __init__(self, message: str = "Invalid argument", details: dict[str, Any] | None = None):
        super().__init__(message, code="INVALID_ARGUMENT", details=details)

"""
Centralized error kinds for the arcade asset server.

Every failure surfaced by the storage layer is classified into one of these
kinds; the HTTP layer maps each kind to a stable status code.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Stable error taxonomy. The value is the text used in error messages."""

    NOT_FOUND = "not found"
    BAD_REQUEST = "bad request"
    INVALID_ARGUMENT = "invalid argument"
    INTERNAL = "internal server error"

    def __str__(self) -> str:
        return self.value


ERROR_KIND_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.INTERNAL: 500,
}


def status_code_for(kind: ErrorKind) -> int:
    """Return the HTTP status code for an error kind."""
    return ERROR_KIND_STATUS_CODES.get(kind, 500)


def create_standard_error_response(
    kind: ErrorKind,
    message: str,
    user_friendly: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Create a standardized error response body.

    The top-level status and detail fields are what arcade.client reads back;
    the nested error object carries the full report.

    Args:
        kind: The error kind
        message: Technical error message
        user_friendly: User-friendly error message (optional)
        details: Additional error details (optional)

    Returns:
        Standardized error response dictionary
    """
    status = status_code_for(kind)
    return {
        "status": status,
        "detail": message,
        "error": {
            "type": kind.name.lower(),
            "status": status,
            "message": message,
            "user_friendly": user_friendly or message,
            "details": details or {},
            "timestamp": datetime.now(UTC).isoformat(),
        }
    }

"""
Exception hierarchy for the arcade asset server.

Each exception class carries an ErrorKind from arcade.error_types. Storage
operations raise these instead of leaking driver exceptions, so callers only
ever need to reason about the stable taxonomy.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar

from .error_types import ErrorKind


@dataclass
class ErrorContext:
    """Contextual information for error reporting and debugging."""

    resource: str | None = None
    operation: str | None = None
    request_id: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "resource": self.resource,
            "operation": self.operation,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class ArcadeError(Exception):
    """
    Base exception for all arcade errors.

    The message is the technical, human-readable error text, e.g.
    ``failed to get room: not found``.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        details: dict[str, Any] | None = None,
        user_friendly: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.details = details or {}
        self.user_friendly = user_friendly or message
        self.already_logged = False

    def mark_logged(self) -> None:
        self.already_logged = True

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
            "user_friendly": self.user_friendly,
            "context": self.context.to_dict(),
            "details": self.details,
        }


class NotFoundError(ArcadeError):
    """No row matched a lookup, update, or delete by identifier."""

    kind = ErrorKind.NOT_FOUND


class BadRequestError(ArcadeError):
    """A referenced record does not exist, or a name is not unique."""

    kind = ErrorKind.BAD_REQUEST


class InvalidArgumentError(ArcadeError):
    """A caller-supplied value failed local validation before any backend call."""

    kind = ErrorKind.INVALID_ARGUMENT


class InternalError(ArcadeError):
    """Query execution, row decoding, or any unclassified backend failure."""

    kind = ErrorKind.INTERNAL


class MissingLocationError(ValueError):
    """An item row has none of its location columns set."""


def create_error_context(**kwargs) -> ErrorContext:
    """Create an error context with the given parameters."""
    return ErrorContext(**kwargs)


def failure_message(fail_msg: str, kind: ErrorKind, detail: Any = None) -> str:
    """
    Build the canonical error message.

    >>> failure_message("failed to get room", ErrorKind.NOT_FOUND)
    'failed to get room: not found'
    """
    if detail is None or detail == "":
        return f"{fail_msg}: {kind.value}"
    return f"{fail_msg}: {kind.value}: {detail}"

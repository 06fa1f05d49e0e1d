"""Shared pieces of the JSON models."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from arcade.exceptions import BadRequestError, InvalidArgumentError, create_error_context

ChangeT = TypeVar("ChangeT")


class APIModel(BaseModel):
    """Accepts both the camelCase alias and the attribute name on input."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def parse_body_id(field: str, value: str) -> UUID:
    """
    Parse an identifier from a request body.

    Raises:
        BadRequestError: If the value is not a well formed UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise BadRequestError(
            f"invalid {field}: '{value}'",
            context=create_error_context(operation="translate_request", metadata={"field": field}),
        ) from None


def translate_change(build: Callable[[], ChangeT]) -> ChangeT:
    """
    Call a change constructor, reporting local validation failures as bad requests.

    Name and description bounds are checked when the change is constructed.
    """
    try:
        return build()
    except InvalidArgumentError as e:
        raise BadRequestError(e.message, context=e.context, details=e.details) from e


def received_id(kind: str, field: str, value: str) -> UUID:
    """
    Parse an identifier from a response body.

    Raises:
        ValueError: If the server sent something that is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"received invalid {kind} {field}: '{value}'") from e


def received_timestamp(kind: str, field: str, value: str) -> datetime:
    """Parse a created/updated value; timestamps without an offset are UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"received invalid {kind} {field}: '{value}'") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed

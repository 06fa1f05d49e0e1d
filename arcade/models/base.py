"""
Shared bounds and validation for resource records, filters and changes.
"""

from datetime import UTC, datetime

from ..exceptions import InvalidArgumentError, create_error_context

MAX_NAME_LEN = 256
MAX_DESCRIPTION_LEN = 4096

DEFAULT_FILTER_LIMIT = 50
MAX_FILTER_LIMIT = 100

# Serialized form of created/updated; fractional seconds have trailing zeros trimmed.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def clamp_limit(limit: int | None) -> int:
    """
    Cap a filter limit at the maximum.

    Zero, negative or absent means no limit; the HTTP layer applies
    DEFAULT_FILTER_LIMIT when a request does not name one.
    """
    if not limit or limit <= 0:
        return 0
    return min(limit, MAX_FILTER_LIMIT)


def clamp_offset(offset: int | None) -> int:
    if not offset or offset < 0:
        return 0
    return offset


def validate_change(kind: str, name: str, description: str) -> None:
    """
    Check name and description bounds before anything reaches the database.

    Raises:
        InvalidArgumentError: If either field is empty or too long
    """
    context = create_error_context(resource=kind, operation="validate_change")
    if not name:
        raise InvalidArgumentError(f"empty {kind} name", context=context)
    if len(name) > MAX_NAME_LEN:
        raise InvalidArgumentError(
            f"{kind} name exceeds maximum length",
            context=context,
            details={"max_length": MAX_NAME_LEN, "length": len(name)},
        )
    if not description:
        raise InvalidArgumentError(f"empty {kind} description", context=context)
    if len(description) > MAX_DESCRIPTION_LEN:
        raise InvalidArgumentError(
            f"{kind} description exceeds maximum length",
            context=context,
            details={"max_length": MAX_DESCRIPTION_LEN, "length": len(description)},
        )


def format_timestamp(value: datetime) -> str:
    """
    Render a timestamp in UTC without an offset suffix.

    >>> format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 120000))
    '2024-01-02T03:04:05.12'
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    text = value.strftime(TIMESTAMP_FORMAT).rstrip("0")
    return text.rstrip(".")

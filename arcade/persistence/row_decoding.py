"""Helpers for turning result-row columns into typed record fields."""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from arcade.models.ids import parse_id


def column_id(row: Mapping[str, Any], column: str) -> UUID:
    """Read a non-null UUID column. Raises KeyError, TypeError or ValueError."""
    return parse_id(row[column])


def column_text(row: Mapping[str, Any], column: str) -> str:
    value = row[column]
    if not isinstance(value, str):
        raise TypeError(f"column {column} is not text: {type(value).__name__}")
    return value


def column_timestamp(row: Mapping[str, Any], column: str) -> datetime:
    """
    Read a timestamp column as an aware UTC datetime.

    The schema stores UTC wall-clock time in TIMESTAMP (without time zone)
    columns, so naive values are tagged as UTC.
    """
    value = row[column]
    if not isinstance(value, datetime):
        raise TypeError(f"column {column} is not a timestamp: {type(value).__name__}")
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)

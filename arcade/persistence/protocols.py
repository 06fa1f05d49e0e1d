"""
Protocols for the arcade persistence layer.

Explicit typing.Protocol definitions for the query drivers and for the
database client, so storage can be built against a real PostgreSQL engine or
an in-memory fake.
"""

# pylint: disable=unnecessary-ellipsis  # Reason: Protocol method bodies use ... per typing.Protocol convention

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any, Protocol, TypeVar

FilterT_contra = TypeVar("FilterT_contra", contravariant=True)


class RowsProtocol(Protocol):
    """Streamed rows of a list query. Must be closed by the consumer."""

    def __aiter__(self) -> AsyncIterator[Mapping[str, Any]]: ...

    async def close(self) -> None: ...


class DatabaseProtocol(Protocol):
    """
    Connection-pooled database client.

    Implemented by arcade.database.Database.
    """

    async def query(self, sql: str, params: Mapping[str, Any] | None = None) -> RowsProtocol:
        """Execute a query returning rows."""
        ...

    async def query_row(self, sql: str, params: Mapping[str, Any] | None = None) -> Mapping[str, Any] | None:
        """Execute a query returning at most one row; None when nothing matched."""
        ...

    async def execute(self, sql: str, params: Mapping[str, Any] | None = None) -> int:
        """Execute a statement returning the affected row count."""
        ...


class ErrorClassifierProtocol(Protocol):
    """Backend-specific classification of constraint violations."""

    def is_foreign_key_violation(self, err: BaseException) -> bool: ...

    def is_unique_violation(self, err: BaseException) -> bool: ...


class QueryDriverProtocol(ErrorClassifierProtocol, Protocol[FilterT_contra]):
    """
    Query text and error classification for one resource kind.

    Implemented by the drivers in arcade.persistence.drivers.postgres.
    """

    def list_query(self, filter_: FilterT_contra) -> str:
        """Build the list query for the given filter."""
        ...

    def get_query(self) -> str: ...

    def create_query(self) -> str: ...

    def update_query(self) -> str: ...

    def remove_query(self) -> str: ...

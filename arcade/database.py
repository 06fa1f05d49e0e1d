"""
Database client for the arcade asset server.

Wraps an SQLAlchemy async engine (asyncpg driver) behind the three calls the
storage layer needs: a row-returning query, a single-row query and a
row-count-returning statement. Connections come from the engine's pool and
are released on every exit path.
"""

from collections.abc import AsyncIterator, Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncResult, create_async_engine

from .config.models import DatabaseConfig
from .structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

Params = Mapping[str, Any] | None


class Rows:
    """
    The streamed result of a list query.

    Holds its pooled connection until close() is called; callers must close
    it on every exit path.
    """

    def __init__(self, conn: AsyncConnection, result: AsyncResult) -> None:
        self._conn = conn
        self._result = result
        self._closed = False

    def __aiter__(self) -> AsyncIterator[Mapping[str, Any]]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Mapping[str, Any]]:
        async for row in self._result.mappings():
            yield row

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._result.close()
        finally:
            await self._conn.close()


class Database:
    """Connection-pooled PostgreSQL client."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def query(self, sql: str, params: Params = None) -> Rows:
        """Execute a query and stream its rows."""
        conn = await self.engine.connect()
        try:
            result = await conn.stream(text(sql), dict(params or {}))
        except BaseException:
            await conn.close()
            raise
        return Rows(conn, result)

    async def query_row(self, sql: str, params: Params = None) -> Mapping[str, Any] | None:
        """Execute a statement in its own transaction and return its first row, if any."""
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            row = result.mappings().first()
        return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Params = None) -> int:
        """Execute a statement in its own transaction and return the affected row count."""
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return result.rowcount

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


def create_engine(config: DatabaseConfig) -> AsyncEngine:
    """
    Create the async engine with a bounded pool.

    pool_recycle bounds each connection's lifetime so connections recycled or
    failed over on the server side are replaced; pool_pre_ping discards dead
    connections before handing them out.
    """
    engine = create_async_engine(
        config.async_url,
        echo=config.echo,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        pool_recycle=config.pool_recycle,
    )
    logger.info(
        "Database engine created",
        database_url=config.async_url,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_recycle=config.pool_recycle,
    )
    return engine


def open_database(config: DatabaseConfig) -> Database:
    return Database(create_engine(config))

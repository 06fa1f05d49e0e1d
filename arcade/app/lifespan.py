"""
Application lifecycle management for the arcade asset server.

Startup loads configuration, configures logging, opens the database pool and
builds one storage per resource kind. Shutdown disposes of the pool.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..api.dependencies import Storages
from ..config import get_config
from ..database import open_database
from ..persistence.protocols import DatabaseProtocol
from ..persistence.repositories import ItemRepository, LinkRepository, PlayerRepository, RoomRepository
from ..structured_logging.enhanced_logging_config import get_logger, setup_logging

logger = get_logger("arcade.lifespan")


def build_storages(db: DatabaseProtocol) -> Storages:
    """Create the storage for every resource kind on a shared database client."""
    return Storages(
        items=ItemRepository(db),
        links=LinkRepository(db),
        players=PlayerRepository(db),
        rooms=RoomRepository(db),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Storages already present on app.state (as placed by tests) are left as
    they are and no database is opened.
    """
    config = get_config()
    setup_logging(config.logging)

    if getattr(app.state, "storages", None) is not None:
        logger.info("Using preconfigured storages")
        yield
        return

    logger.info("Starting arcade asset server")
    database = open_database(config.database)
    app.state.database = database
    app.state.storages = build_storages(database)

    try:
        yield
    finally:
        logger.info("Shutting down arcade asset server")
        await database.close()

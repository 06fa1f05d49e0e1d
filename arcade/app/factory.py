"""
FastAPI application factory for the arcade asset server.

This module handles FastAPI app creation, middleware configuration,
and router registration.
"""

from fastapi import FastAPI

from .. import __version__
from ..api.error_handlers import register_error_handlers
from ..api.health import health_router
from ..api.items import item_router
from ..api.links import link_router
from ..api.metrics import metrics_router
from ..api.players import player_router
from ..api.rooms import room_router
from ..middleware.correlation_middleware import CorrelationMiddleware
from ..structured_logging.enhanced_logging_config import get_logger
from .lifespan import lifespan

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title="Arcade Assets API",
        description="Items, links, players and rooms of the arcade",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationMiddleware)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(item_router)
    app.include_router(link_router)
    app.include_router(metrics_router)
    app.include_router(player_router)
    app.include_router(room_router)

    logger.info("Application created", routes=len(app.routes))
    return app

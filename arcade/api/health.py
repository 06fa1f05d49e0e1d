"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from arcade.structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health(request: Request) -> JSONResponse:
    """Report service health, including database reachability when a database is attached."""
    body: dict[str, Any] = {"status": "healthy", "timestamp": datetime.now(UTC).isoformat()}

    database = getattr(request.app.state, "database", None)
    if database is None:
        body["database"] = "not configured"
        return JSONResponse(body)

    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check database ping failed", error=str(e), error_type=type(e).__name__)
        body["status"] = "unhealthy"
        body["database"] = "unavailable"
        return JSONResponse(body, status_code=503)

    body["database"] = "ok"
    return JSONResponse(body)

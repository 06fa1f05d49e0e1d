"""Prometheus metrics endpoint."""

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from arcade.structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

metrics_router = APIRouter(tags=["metrics"])

logger.info("Metrics API router initialized", path="/metrics")


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Report the service metrics in the Prometheus text format."""
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)

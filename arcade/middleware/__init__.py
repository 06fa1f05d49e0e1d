"""ASGI middleware for the arcade asset server."""

from .correlation_middleware import CorrelationMiddleware

__all__ = ["CorrelationMiddleware"]

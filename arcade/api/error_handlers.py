"""
Exception handlers mapping the arcade error taxonomy onto HTTP responses.

    not found              404
    bad request            400
    invalid argument       400
    internal server error  500

Every error response has the body produced by
arcade.error_types.create_standard_error_response.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from arcade.error_types import ErrorKind, create_standard_error_response, status_code_for
from arcade.exceptions import ArcadeError
from arcade.middleware.request_metrics import observe_error
from arcade.structured_logging.enhanced_logging_config import get_logger, log_exception_once
from arcade.utils.error_logging import create_context_from_request

logger = get_logger(__name__)


def _error_response(kind: ErrorKind, message: str, user_friendly: str | None = None, details: dict[str, Any] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(kind),
        content=create_standard_error_response(kind, message, user_friendly=user_friendly, details=details),
    )


async def arcade_exception_handler(request: Request, exc: ArcadeError) -> JSONResponse:
    """Handle ArcadeError and its subclasses."""
    if not exc.context.request_id:
        exc.context.request_id = getattr(request.state, "correlation_id", None)

    log_exception_once(
        logger,
        "warning" if exc.kind is not ErrorKind.INTERNAL else "error",
        "Arcade exception handled",
        exc=exc,
        path=request.url.path,
        method=request.method,
        status_code=status_code_for(exc.kind),
    )
    observe_error(exc.kind)
    return _error_response(exc.kind, exc.message, user_friendly=exc.user_friendly, details=exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests (including non-JSON bodies) as bad requests."""
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info("Request validation failed", path=request.url.path, method=request.method, errors=errors)
    observe_error(ErrorKind.BAD_REQUEST)
    return _error_response(ErrorKind.BAD_REQUEST, "invalid body: a valid json encoded body is required", details={"errors": errors})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything that escaped classification."""
    logger.error(
        "Unhandled exception",
        error_type=type(exc).__name__,
        error=str(exc),
        context=create_context_from_request(request).to_dict(),
        exc_info=exc,
    )
    observe_error(ErrorKind.INTERNAL)
    return _error_response(ErrorKind.INTERNAL, "internal server error", user_friendly="An internal error occurred.")


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers with a FastAPI application."""
    app.add_exception_handler(ArcadeError, arcade_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    logger.info("Error handlers registered")

"""
Standardized error logging utilities for the arcade asset server.

Storage code never raises an ArcadeError directly. It goes through
log_and_raise() so that every surfaced failure produces exactly one error log
entry carrying the operation context.
"""

from typing import Any, NoReturn

from fastapi import Request

from ..exceptions import ArcadeError, ErrorContext, create_error_context
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


def log_and_raise(
    exception_class: type[ArcadeError],
    message: str,
    context: ErrorContext | None = None,
    details: dict[str, Any] | None = None,
    user_friendly: str | None = None,
    logger_name: str | None = None,
    cause: BaseException | None = None,
) -> NoReturn:
    """
    Log an error and raise an arcade exception.

    Args:
        exception_class: The ArcadeError subclass to raise
        message: Technical error message
        context: Error context information
        details: Additional error details
        user_friendly: User-friendly error message
        logger_name: Specific logger name to use (defaults to current module)
        cause: The underlying exception, chained as __cause__

    Raises:
        The specified arcade exception
    """
    error_logger = get_logger(logger_name) if logger_name else logger

    if context is None:
        context = create_error_context()

    error_logger.error(
        message,
        error_type=exception_class.__name__,
        error_kind=exception_class.kind.value,
        context=context.to_dict(),
        details=details or {},
    )

    exc = exception_class(
        message=message,
        context=context,
        details=details,
        user_friendly=user_friendly,
    )
    exc.mark_logged()
    raise exc from cause


def create_context_from_request(request: Request | None) -> ErrorContext:
    """Create error context from a FastAPI request."""
    if request is None:
        return create_error_context()

    metadata = {
        "path": str(request.url.path),
        "method": request.method,
        "user_agent": request.headers.get("user-agent", ""),
        "remote_addr": request.client.host if request.client else "",
    }
    request_id = getattr(request.state, "correlation_id", None) if hasattr(request, "state") else None
    return create_error_context(request_id=request_id, metadata=metadata)

"""
Structlog-based logging configuration for the arcade asset server.

This is the main entry point for the logging system. Application code obtains
loggers through get_logger() and never calls structlog.get_logger() directly.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

from arcade.structured_logging.logging_processors import add_correlation_id, sanitize_sensitive_data

# Module-level logger for internal use.
logger = structlog.get_logger(__name__)


class _LoggingState:
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False


_logging_state = _LoggingState()


def _add_environment(environment: str) -> Any:
    def processor(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def configure_structlog(
    environment: str = "local",
    log_level: str = "INFO",
    log_format: str = "key_value",
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        environment: Environment name, added to every log entry
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "key_value" or "json"
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"])

    structlog.configure(
        processors=[
            merge_contextvars,
            _add_environment(environment),
            sanitize_sensitive_data,
            add_correlation_id,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(logging_config: Any, *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a LoggingConfig.

    Args:
        logging_config: Logging configuration (environment, level, format)
        force_reconfigure: When True, reconfigure even if already initialized
    """
    if _logging_state.initialized and not force_reconfigure:
        get_logger("arcade.structured_logging.setup").debug("setup_logging skipped; already initialized")
        return

    configure_structlog(
        environment=logging_config.environment,
        log_level=logging_config.level,
        log_format=logging_config.format,
    )
    _configure_uvicorn_logging()

    get_logger("arcade.structured_logging.setup").info(
        "Logging system initialized",
        environment=logging_config.environment,
        log_level=logging_config.level,
        log_format=logging_config.format,
    )
    _logging_state.initialized = True


def _configure_uvicorn_logging() -> None:
    """Route uvicorn's loggers through the root handler."""
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a structlog logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_exception_once(
    bound_logger: BoundLogger,
    level: str,
    message: str,
    *,
    exc: Exception | None = None,
    **kwargs: Any,
) -> None:
    """
    Log an exception once, respecting exceptions that have already been logged.

    Args:
        bound_logger: Structlog bound logger instance.
        level: Logging level to use (for example, "error" or "warning").
        message: Log message to emit.
        exc: Optional exception to include in the log entry.
        **kwargs: Additional key-value pairs for structured logging.
    """
    if exc is not None:
        if getattr(exc, "already_logged", False):
            return
        kwargs.setdefault("error_type", type(exc).__name__)
        kwargs.setdefault("error", str(exc))

    log_method = getattr(bound_logger, level.lower(), bound_logger.error)
    log_method(message, **kwargs)

    if exc is not None:
        marker = getattr(exc, "mark_logged", None)
        if callable(marker):
            marker()

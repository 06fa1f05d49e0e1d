"""
Configuration module for the arcade asset server.

Usage:
    from arcade.config import get_config

    config = get_config()
    logger.info("Database configuration", url=config.database.url)
"""

import sys
import threading
from functools import lru_cache
from os import getenv

from .models import AppConfig, DatabaseConfig, LoggingConfig, ServerConfig

__all__ = ["get_config", "reset_config", "AppConfig", "DatabaseConfig", "LoggingConfig", "ServerConfig"]

_config_lock = threading.Lock()


def _is_test_mode() -> bool:
    """Detect if running under pytest."""
    if "pytest" in sys.modules:
        return True
    return bool(getenv("PYTEST_CURRENT_TEST"))


@lru_cache(maxsize=1)
def _get_config_cached() -> AppConfig:
    """Production config loader with caching."""
    with _config_lock:
        return AppConfig()


def get_config() -> AppConfig:
    """
    Get application configuration (singleton in production, fresh in tests).

    In test mode a fresh instance is built from the current environment on
    every call so tests can adjust environment variables freely.

    Raises:
        pydantic.ValidationError: If configuration is invalid or required fields are missing
    """
    if _is_test_mode():
        return AppConfig()
    return _get_config_cached()


def reset_config() -> None:
    """Reset the configuration cache, forcing a reload on next access."""
    with _config_lock:
        _get_config_cached.cache_clear()

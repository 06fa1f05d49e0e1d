"""
Structured logging package for the arcade asset server.

All imports should use explicit paths like
'from arcade.structured_logging.enhanced_logging_config import get_logger'.

The package is named 'structured_logging' rather than 'logging' to avoid
shadowing Python's standard library logging module.
"""

__all__ = []

"""
Logging processors for structlog event processing.

This module provides processors for sanitizing sensitive data and adding
correlation IDs to log entries.
"""

import re
import uuid
from typing import Any

# Sensitive patterns that should be redacted. These match whole words or
# specific suffixes/prefixes of event keys.
SENSITIVE_PATTERNS = [
    r"\bpassword\b",
    r"\btoken\b",
    r"\bsecret\b",
    r"_key\b",
    r"^key$",
    r"\bcredential\b",
    r"\bauthorization\b",
    r"\bdsn\b",
]


def _redact_url_password(value: str) -> str:
    """Mask the password portion of a database URL."""
    return re.sub(r"(://[^:/@]+:)[^@]+(@)", r"\1***\2", value)


def sanitize_sensitive_data(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive data from log entries.

    Redacts values whose keys look like credentials, and masks passwords
    embedded in database URLs.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to sanitize

    Returns:
        Sanitized event dictionary
    """

    def sanitize_dict(d: dict[str, Any]) -> dict[str, Any]:
        sanitized: dict[str, Any] = {}
        for key, value in d.items():
            key_lower = str(key).lower()
            if isinstance(value, dict):
                sanitized[key] = sanitize_dict(value)
            elif any(re.search(pattern, key_lower) for pattern in SENSITIVE_PATTERNS):
                sanitized[key] = "[REDACTED]"
            elif key_lower.endswith("url") and isinstance(value, str):
                sanitized[key] = _redact_url_password(value)
            else:
                sanitized[key] = value
        return sanitized

    return sanitize_dict(event_dict)


def add_correlation_id(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Add correlation ID to log entries if not already present.

    A request-scoped ``correlation_id`` bound through context variables takes
    precedence because ``merge_contextvars`` runs before this processor.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = str(uuid.uuid4())

    return event_dict

"""
Logging configuration for gym_http.

Sets up structured logging with:
- Settings-driven configuration (LoggingSettings)
- JSON formatting for production, pretty console for development
- Redaction of credentials that might ride along in event fields

Nothing here runs at import time; a host application opts in by calling
setup_logging().
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from gym_http.config import LoggingSettings
from gym_http.utils.logger import get_logger

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "authorization",
    "proxy_authorization",
    "cookie",
    "set_cookie",
    "token",
    "password",
    "secret",
    "key",
}

_PROTECTED_KEYS = ("level", "event", "timestamp", "logger")


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PROTECTED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in ("password", "token", "secret", "key")
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def build_processors(log_format: str) -> list[Processor]:
    """Return the processor chain for the given output format."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        return shared_processors + [structlog.processors.JSONRenderer()]
    return shared_processors + [
        structlog.dev.ConsoleRenderer(colors=True, pad_event=15, sort_keys=False)
    ]


def configure_structlog(settings: LoggingSettings) -> None:
    """
    Configure structlog with the processors for settings.log_format.

    json: one JSON object per line
    console: pretty console formatting with colors
    """
    structlog.configure(
        processors=build_processors(settings.log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(settings: LoggingSettings) -> None:
    """Route stdlib logging to stdout at the configured level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    # Reduce noise from the transport stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Initialize logging for an application using gym_http.

    Should be called early in application startup.
    """
    settings = settings or LoggingSettings()

    configure_stdlib_logging(settings)
    configure_structlog(settings)

    logger = get_logger(__name__)
    logger.info(
        "logging_initialized",
        log_level=settings.log_level,
        log_format=settings.log_format,
    )

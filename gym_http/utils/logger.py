"""
Logger factory for gym_http.

Provides:
- get_logger(): Get a configured logger instance
- log_with_context(): Bind context for a scope
"""

import logging

import structlog
from structlog.stdlib import BoundLogger


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Events go through the stdlib logger of the same name, so nothing is
    emitted below WARNING until the host application configures logging
    (see gym_http.utils.logging_config.setup_logging).

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance

    Example:
        >>> from gym_http.utils.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.debug("form_data_pushed", method="POST", body_bytes=12)
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """
    Bind context to a logger for all subsequent log calls.

    Example:
        >>> log = log_with_context(get_logger(__name__), url="https://example.com")
        >>> log.debug("form_data_response", status_code=200)
    """
    return logger.bind(**context)

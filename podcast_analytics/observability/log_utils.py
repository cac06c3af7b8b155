"""
Logging helpers for "log and continue" paths.

Used where a secondary write fails (download aggregate refresh, saving a
fetched podcast to the library) and the request must still succeed.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_ERROR_LENGTH = 200


def short_error(exc: BaseException, max_length: int = MAX_ERROR_LENGTH) -> str:
    """
    Exception text cut to a size safe for logs and error details.

    Provider errors can echo whole response bodies.
    """
    text = str(exc)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def _context_value(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    return str(value)[:500]


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log a swallowed exception with its traceback and request context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Identifiers of the affected records (user_id, url, ...)
    """
    extra = {key: _context_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = short_error(exc)
    logger.error(message, exc_info=exc, extra=extra)

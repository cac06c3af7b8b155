"""
Observability module.

Logging setup, correlation ID tracking, and request logging middleware.
"""

from podcast_analytics.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from podcast_analytics.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]

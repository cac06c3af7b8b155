"""
Logging setup for the API process.

One stdout handler on the root logger; every line carries the request's
correlation ID.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from podcast_analytics.observability.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("urllib3", "httpx", "googleapiclient", "spotipy", "sqlalchemy.engine")


def configure_logging(level: str = "INFO") -> None:
    """
    Install the stdout handler, replacing any handlers already on the root logger.

    Args:
        level: Root log level name; unknown names fall back to INFO
    """
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

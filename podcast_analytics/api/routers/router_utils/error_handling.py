"""
API error handling utilities.

Decorator that turns domain exceptions raised by services into
HTTPExceptions with the status code each exception carries.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from podcast_analytics.core.exceptions import PodcastAnalyticsError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_api_errors(func: F) -> F:
    """
    Decorator to map service errors onto HTTP responses.

    This centralizes:
    - Logging of errors with their context
    - Mapping PodcastAnalyticsError subclasses to their status codes
    - Hiding unexpected failures behind a generic 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except PodcastAnalyticsError as e:
            log = logger.error if e.status_code >= 500 else logger.warning
            log(
                f"{func.__name__} failed",
                extra={
                    "error_type": type(e).__name__,
                    "error": e.message,
                    "status_code": e.status_code,
                },
            )
            raise HTTPException(
                status_code=e.status_code,
                detail={"error": e.message, "details": e.details or None},
            ) from e

        except Exception as e:
            logger.exception(
                f"Unexpected failure in {func.__name__}",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Server Error",
            ) from e

    return wrapper  # type: ignore

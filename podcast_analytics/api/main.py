"""
FastAPI application with assembled routers.

Initializes the FastAPI app with middleware, exception handlers and all
API routers, and launches uvicorn when run as a module.

Dependencies: fastapi, podcast_analytics.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from podcast_analytics.api.deps.dependencies import get_service_cache
from podcast_analytics.api.middleware import SecurityHeadersMiddleware
from podcast_analytics.api.rate_limit import limiter
from podcast_analytics.boundary.db.connection import get_async_engine
from podcast_analytics.boundary.db.create_tables import create_all_tables
from podcast_analytics.configs import get_settings
from podcast_analytics.core.exceptions import PodcastAnalyticsError
from podcast_analytics.models.common import ErrorResponse
from podcast_analytics.observability import configure_logging
from podcast_analytics.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import (
    ai_insights_router,
    audience_router,
    auth_router,
    health_router,
    podcast_details_router,
    podcasts_router,
    summaries_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and creates missing tables on startup; clears
    cached clients and disposes the engine on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    if settings.database.auto_create_tables:
        await create_all_tables()
        logger.info("Database tables ensured")

    yield

    # Shutdown
    get_service_cache().clear()
    await get_async_engine().dispose()
    logger.info("Service cache cleared")


def error_response(
    status_code: int,
    error: str,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the standard error envelope."""
    body = ErrorResponse(error=error, details=details or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail:
        return error_response(
            exc.status_code,
            str(detail["error"]),
            detail.get("details"),
            getattr(exc, "headers", None),
        )
    return error_response(exc.status_code, str(detail), headers=getattr(exc, "headers", None))


async def domain_exception_handler(request: Request, exc: PodcastAnalyticsError) -> JSONResponse:
    # Errors raised from dependencies never pass through handle_api_errors
    return error_response(exc.status_code, exc.message, exc.details)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    message = ", ".join(
        f"{e['field']}: {e['message']}" if e["field"] else e["message"] for e in errors
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message or "Invalid request",
        {"errors": errors},
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(
        "Rate limit exceeded",
        extra={"path": request.url.path, "limit": str(exc.detail)},
    )
    return error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many requests, please try again later",
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Podcast Analytics API",
        description="Podcast and video analytics dashboard backend",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Routes share one limiter; a new app starts with empty buckets
    limiter.enabled = settings.rate_limit.enabled
    limiter.reset()
    app.state.limiter = limiter

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,
    )

    # Observability middleware; the last one added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PodcastAnalyticsError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(podcasts_router, prefix="/api/v1")
    app.include_router(ai_insights_router, prefix="/api/v1")
    app.include_router(audience_router, prefix="/api/v1")
    app.include_router(podcast_details_router, prefix="/api/v1")
    app.include_router(summaries_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "podcast_analytics.api.main:app",
        host="0.0.0.0",
        port=8000,
    )

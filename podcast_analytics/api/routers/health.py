"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: podcast_analytics.boundary.db
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.boundary.db.connection import get_async_db

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
@rate_limited
async def health_check(request: Request) -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
@rate_limited
async def health_check_db(
    request: Request,
    db: AsyncSession = Depends(get_async_db),
) -> HealthResponse:
    """Database health check; 503 when the database is unreachable."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed",
        ) from e
    return HealthResponse(status="healthy", message="Database connection OK")

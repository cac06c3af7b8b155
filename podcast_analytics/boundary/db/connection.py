"""
Database connection management.

Async SQLAlchemy engine, session factory, and the FastAPI dependency
for per-request session injection.

Dependencies: sqlalchemy, podcast_analytics.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from podcast_analytics.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the async SQLAlchemy engine.

    Pool sizing applies to server databases only; SQLite keeps the
    driver's default pool. pool_pre_ping=True detects stale connections.

    Returns:
        AsyncEngine: Configured async engine (cached per process)

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database

    options: dict[str, Any] = {"echo": db_config.echo_sql}
    if not db_config.is_sqlite:
        options.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_pre_ping=True,
        )

    return create_async_engine(db_config.url, **options)


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create the async session factory.

    expire_on_commit=False keeps loaded attributes usable after commit,
    which async sessions cannot lazy-load.

    Returns:
        async_sessionmaker: Factory bound to the engine
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped async session.

    Services commit explicitly. Anything left uncommitted when the
    request fails is rolled back before the session closes.

    Yields:
        AsyncSession: Session scoped to the request

    Usage:
        @router.get("/{id}")
        async def get_podcast(id: str, db: AsyncSession = Depends(get_async_db)):
            return await podcast_crud.get_by_id(db, parse_identifier(id))
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

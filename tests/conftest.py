"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database session, user factories, fake authenticated
users, and sample podcast documents.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from podcast_analytics.boundary.db.base import Base
    from podcast_analytics.boundary.db.models import PodcastModel, UserModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def create_user(test_async_db):
    """
    Factory inserting committed users.

    Usage:
        user = await create_user(email="a@example.com", role="admin")
    """
    from podcast_analytics.boundary.db.CRUD.user_crud import user_crud

    async def _create(
        email: str | None = None,
        role: str = "user",
        name: str = "Test User",
        password_hash: str = "not-a-real-hash",
    ):
        user = await user_crud.create(
            test_async_db,
            name=name,
            email=email or f"{uuid.uuid4().hex[:8]}@example.com",
            password_hash=password_hash,
            role=role,
        )
        await test_async_db.commit()
        return user

    return _create


def make_fake_user(role: str = "user") -> SimpleNamespace:
    """Stand-in for UserModel in router tests."""
    return SimpleNamespace(
        id=uuid.uuid4(),
        name="Fake User",
        email="fake@example.com",
        role=role,
        total_downloads=0,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def fake_user() -> SimpleNamespace:
    return make_fake_user()


@pytest.fixture
def podcast_document():
    """Raw podcast document data with episodes, audience and engagement."""

    def _build(user_id: uuid.UUID, **overrides):
        data = {
            "id": uuid.uuid4(),
            "user_id": user_id,
            "title": "Signal and Noise",
            "description": "A show about data.",
            "source": "youtube",
            "source_id": "abc123",
            "url": "https://www.youtube.com/watch?v=abc123",
            "category": "Technology",
            "total_downloads": 1000,
            "platform_stats": {
                "spotify": {"downloads": 300},
                "apple": {"downloads": 200},
                "google": {"downloads": 100},
                "youtube": {"downloads": 250},
            },
            "episodes": [
                {
                    "title": "Old",
                    "publishDate": "2024-01-01T00:00:00Z",
                    "downloads": {"total": 50},
                    "engagement": {"completionRate": 40},
                },
                {
                    "title": "New",
                    "publishDate": "2024-03-01T00:00:00Z",
                    "downloads": {"total": 500},
                    "engagement": {"completionRate": 80, "averageListenDuration": 1200},
                },
                {"title": "Undated", "downloads": {"total": 5}},
            ],
            "audience": {
                "gender": {"male": 55, "female": 43, "other": 2},
                "countries": [
                    {"country": "US", "percentage": 60, "listeners": 600},
                    {"country": "UK", "percentage": 25, "listeners": 250},
                ],
            },
            "engagement_metrics": {
                "averageListenDuration": 900,
                "completionRate": 65,
                "subscribers": {"total": 120, "weeklyChange": 7},
            },
        }
        data.update(overrides)
        return data

    return _build


@pytest.fixture
def fake_user_factory():
    """make_fake_user for fixtures in nested conftest files."""
    return make_fake_user

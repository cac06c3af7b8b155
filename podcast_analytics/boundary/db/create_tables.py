"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, podcast_analytics.configs
System role: Database schema initialization

Usage:
    python -m podcast_analytics.boundary.db.create_tables
"""

import asyncio

from podcast_analytics.boundary.db.base import Base
from podcast_analytics.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from podcast_analytics.boundary.db.models import PodcastModel, UserModel  # noqa: F401


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged.

    Raises:
        SQLAlchemyError: If the connection or DDL fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


if __name__ == "__main__":
    asyncio.run(create_all_tables())
    print("All tables created successfully.")

"""
SQLAlchemy declarative base and common mixins.

Base class for every ORM model plus mixins for the primary key and
timestamp columns shared by users and podcasts.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    Models inheriting from this class are included in table creation.
    """


class UUIDMixin:
    """
    Mixin providing a UUID v4 primary key.

    Uses the generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite.

    Attributes:
        id: UUID primary key, generated on insert
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class TimestampMixin:
    """
    Mixin providing creation and modification timestamps (UTC).

    Attributes:
        created_at: Row creation timestamp, never changes
        updated_at: Refreshed on every update
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

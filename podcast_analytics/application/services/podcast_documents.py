"""
Podcast document helpers shared by the podcast-scoped services.

Converts between ORM rows and validated PodcastRecord documents, runs
the ownership check, and refreshes the owner's download aggregate.

Dependencies: pydantic, sqlalchemy, podcast_analytics.boundary.db.CRUD
System role: Document mapping and access control for podcast services
"""

import logging
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.boundary.db.CRUD.podcast_crud import podcast_crud
from podcast_analytics.boundary.db.CRUD.user_crud import user_crud
from podcast_analytics.boundary.db.models import PodcastModel, UserModel
from podcast_analytics.core.exceptions import (
    NotAuthorizedError,
    PodcastNotFoundError,
    ValidationError,
)
from podcast_analytics.core.identifiers import parse_identifier
from podcast_analytics.models.podcast import PodcastRecord
from podcast_analytics.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SCALAR_COLUMNS = (
    "title",
    "description",
    "rss_feed",
    "source",
    "source_id",
    "url",
    "website",
    "cover_image",
    "category",
    "explicit",
    "total_downloads",
    "duration",
    "published_at",
)

JSON_COLUMNS = (
    "platform_stats",
    "episodes",
    "audience",
    "chart_rankings",
    "engagement_metrics",
    "monetization",
    "ai_insights",
    "statistics",
    "provider_data",
)


def validate_model(model_cls: type[ModelT], data: Any) -> ModelT:
    """
    Validate data against a schema, reporting failures as a 400.

    Args:
        model_cls: Pydantic model class
        data: Raw data

    Returns:
        Validated model instance

    Raises:
        ValidationError: With a readable message and per-field errors
    """
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        message = "; ".join(
            f"{err['field']}: {err['message']}" if err["field"] != "body" else err["message"]
            for err in errors
        )
        raise ValidationError(message, details={"errors": errors}) from e


def validate_record(data: dict[str, Any]) -> PodcastRecord:
    """Validate a full podcast document."""
    return validate_model(PodcastRecord, data)


def to_record(podcast: PodcastModel) -> PodcastRecord:
    """
    Build the validated document view of a stored row.

    Args:
        podcast: Loaded PodcastModel

    Returns:
        PodcastRecord: Document with id, owner and timestamps
    """
    data: dict[str, Any] = {
        column: getattr(podcast, column) for column in SCALAR_COLUMNS + JSON_COLUMNS
    }
    data.update(
        id=podcast.id,
        user_id=podcast.user_id,
        created_at=podcast.created_at,
        last_updated=podcast.updated_at,
    )
    return validate_record(data)


def to_columns(record: PodcastRecord) -> dict[str, Any]:
    """
    Flatten a document into column values.

    Nested documents are stored in their camelCase JSON form, the same
    shape the API returns.

    Args:
        record: Validated podcast document

    Returns:
        dict: Keyword arguments for PodcastCRUD.create/update
    """
    dumped = record.model_dump(mode="json", by_alias=True)
    columns: dict[str, Any] = {column: getattr(record, column) for column in SCALAR_COLUMNS}
    for column in JSON_COLUMNS:
        columns[column] = dumped[to_camel(column)]
    return columns


def ensure_owner(podcast: PodcastModel, user: UserModel, action: str) -> None:
    """
    Allow the owner or an admin.

    Raises:
        NotAuthorizedError: For any other user
    """
    if podcast.user_id != user.id and user.role != "admin":
        raise NotAuthorizedError(str(user.id), action)


async def load_owned_podcast(
    db: AsyncSession,
    raw_id: Any,
    user: UserModel,
    action: str,
) -> PodcastModel:
    """
    Resolve a podcast ID and run the ownership check.

    Args:
        db: Async database session
        raw_id: Identifier as received from the request
        user: Current user
        action: Phrase used in the authorization error ("update this podcast")

    Returns:
        PodcastModel: The loaded row

    Raises:
        InvalidIdentifierError: If raw_id is missing or malformed
        PodcastNotFoundError: If no podcast has that ID
        NotAuthorizedError: If the user neither owns it nor is an admin
    """
    podcast_id = parse_identifier(raw_id, "podcast")
    podcast = await podcast_crud.get_by_id(db, podcast_id)
    if podcast is None:
        raise PodcastNotFoundError(str(raw_id))
    ensure_owner(podcast, user, action)
    return podcast


async def save_record(
    db: AsyncSession,
    podcast: PodcastModel,
    record: PodcastRecord,
) -> PodcastRecord:
    """Write a validated document back to its row and commit."""
    podcast = await podcast_crud.update(db, podcast, **to_columns(record))
    await db.commit()
    return to_record(podcast)


async def refresh_user_downloads(db: AsyncSession, user_id: UUID) -> None:
    """
    Recompute a user's total_downloads from their podcasts.

    Failures are logged; the write that triggered the refresh has
    already been committed.
    """
    try:
        total = await podcast_crud.sum_downloads(db, user_id)
        await user_crud.set_total_downloads(db, user_id, total)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        log_exception_with_context(
            logger,
            "Failed to refresh user download total",
            e,
            user_id=str(user_id),
        )

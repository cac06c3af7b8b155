"""
CRUD operations for database models.

Exports the base CRUD class and model-specific implementations with
pre-instantiated singletons for direct use.

Usage:
    from podcast_analytics.boundary.db.CRUD import podcast_crud, user_crud

    podcast = await podcast_crud.get_by_id(db, podcast_id)
"""

from podcast_analytics.boundary.db.CRUD.base_crud import BaseCRUD
from podcast_analytics.boundary.db.CRUD.podcast_crud import PodcastCRUD, podcast_crud
from podcast_analytics.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "PodcastCRUD",
    "podcast_crud",
]

"""
Database models package.

Exports:
  - UserModel: Registered user
  - PodcastModel: Podcast document in a user's library

Dependencies: sqlalchemy, podcast_analytics.boundary.db.base
System role: Database model definitions for domain entities
"""

from podcast_analytics.boundary.db.models.podcast_model import PodcastModel
from podcast_analytics.boundary.db.models.user_model import UserModel

__all__ = [
    "UserModel",
    "PodcastModel",
]

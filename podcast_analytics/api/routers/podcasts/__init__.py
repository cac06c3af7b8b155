"""Podcast library routes."""

from .podcasts_router import router

__all__ = ["router"]

"""Shared router helpers."""

from podcast_analytics.api.routers.router_utils.error_handling import handle_api_errors

__all__ = ["handle_api_errors"]

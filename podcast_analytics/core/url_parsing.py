"""
Podcast URL classification and ID extraction.

Routes a pasted URL to the provider that can describe it, and pulls the
provider-specific identifier out of it.

Dependencies: re
System role: Source detection for the metadata-fetch flow
"""

import re
from typing import Literal

from podcast_analytics.core.exceptions import ValidationError

SourceType = Literal["spotify", "youtube", "rss"]

URL_PATTERN = re.compile(
    r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$"
)

_SPOTIFY_PATTERN = re.compile(r"spotify\.com/(show|episode|track)/([a-zA-Z0-9]+)")
_YOUTUBE_PLAYLIST_PATTERN = re.compile(r"list=([a-zA-Z0-9_-]+)")
_YOUTUBE_VIDEO_PATTERN = re.compile(
    r"(?:watch\?v=|youtu\.be/|youtube\.com/shorts/|youtube\.com/embed/)([a-zA-Z0-9_-]+)"
)


def is_valid_url(value: str) -> bool:
    """Return True if value is an http(s) URL."""
    return bool(URL_PATTERN.match(value))


def detect_source(url: str) -> SourceType:
    """
    Classify a URL by provider.

    Args:
        url: URL pasted by the user

    Returns:
        SourceType: "spotify", "youtube", or "rss" for anything else
    """
    if "spotify.com" in url:
        return "spotify"
    if "youtube.com" in url or "youtu.be" in url:
        return "youtube"
    return "rss"


def parse_spotify_url(url: str) -> tuple[str, str]:
    """
    Extract the Spotify resource kind and ID.

    Args:
        url: open.spotify.com URL

    Returns:
        tuple[str, str]: (kind, id) where kind is show, episode, or track

    Raises:
        ValidationError: If no supported resource is found
    """
    match = _SPOTIFY_PATTERN.search(url)
    if not match:
        raise ValidationError("Invalid Spotify URL. Could not extract ID.", field="podcastUrl")
    return match.group(1), match.group(2)


def parse_youtube_url(url: str) -> tuple[str, str]:
    """
    Extract the YouTube resource kind and ID.

    A playlist parameter wins over a video ID when both are present.

    Args:
        url: youtube.com or youtu.be URL

    Returns:
        tuple[str, str]: ("playlist", id) or ("video", id)

    Raises:
        ValidationError: If neither a playlist nor a video ID is present
    """
    playlist = _YOUTUBE_PLAYLIST_PATTERN.search(url)
    if playlist:
        return "playlist", playlist.group(1)

    video = _YOUTUBE_VIDEO_PATTERN.search(url)
    if video:
        return "video", video.group(1)

    raise ValidationError(
        "Invalid YouTube URL. Please provide a URL for a video or a playlist.",
        field="podcastUrl",
    )

"""Utility helpers for HTTP access, settings, and URL/duration parsing."""

from .duration import parse_duration_minutes
from .http_client import HttpClient
from .settings import IngestSettings
from .url_resolver import (
    build_thumbnail_url,
    build_watch_url,
    extract_playlist_id,
    extract_video_id,
    resolve_playlist,
    resolve_video,
)

__all__ = [
    "HttpClient",
    "IngestSettings",
    "parse_duration_minutes",
    "extract_playlist_id",
    "extract_video_id",
    "resolve_playlist",
    "resolve_video",
    "build_watch_url",
    "build_thumbnail_url",
]

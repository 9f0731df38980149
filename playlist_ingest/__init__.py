"""Ingest YouTube playlists into ordered course items."""

from .errors import (
    AuthenticationError,
    CourseNotFoundError,
    ImportValidationError,
    IngestError,
    InvalidUrlError,
    MissingCredentialError,
    PlaylistNotFoundError,
    TransportError,
)
from .ingest import (
    InMemoryCourseStore,
    PlaylistFetcher,
    PlaylistImporter,
    fetch_playlist,
    fetch_playlist_sync,
    project_playlist,
    project_video,
)
from .utils import HttpClient, IngestSettings, extract_playlist_id, extract_video_id, parse_duration_minutes

__version__ = "0.1.0"

__all__ = [
    "PlaylistFetcher",
    "PlaylistImporter",
    "InMemoryCourseStore",
    "HttpClient",
    "IngestSettings",
    "fetch_playlist",
    "fetch_playlist_sync",
    "project_video",
    "project_playlist",
    "extract_playlist_id",
    "extract_video_id",
    "parse_duration_minutes",
    "IngestError",
    "InvalidUrlError",
    "MissingCredentialError",
    "TransportError",
    "AuthenticationError",
    "PlaylistNotFoundError",
    "CourseNotFoundError",
    "ImportValidationError",
]

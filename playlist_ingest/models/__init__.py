"""Data models for playlists, videos, course item drafts, and fetch outcomes."""

from .course_models import CourseItemDraft, CourseItemMetadata, ImportResult
from .outcome_models import FailureReason, FetchOutcome, FetchStatus
from .playlist_models import (
    UNAVAILABLE_TITLE,
    FetchedPlaylist,
    PlaylistMetadata,
    PlaylistReference,
    VideoRecord,
    VideoReference,
)

__all__ = [
    "PlaylistReference",
    "VideoReference",
    "PlaylistMetadata",
    "VideoRecord",
    "FetchedPlaylist",
    "UNAVAILABLE_TITLE",
    "CourseItemDraft",
    "CourseItemMetadata",
    "ImportResult",
    "FetchOutcome",
    "FetchStatus",
    "FailureReason",
]

"""Pydantic models for playlists, videos, and the identifiers that reference them."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

YOUTUBE_ID_PATTERN = r"^[A-Za-z0-9_-]+$"
UNAVAILABLE_TITLE = "Unavailable video"


class PlaylistReference(BaseModel):
    """A validated playlist identifier extracted from a URL."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=YOUTUBE_ID_PATTERN)


class VideoReference(BaseModel):
    """A validated single-video identifier extracted from a URL."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=YOUTUBE_ID_PATTERN)


class PlaylistMetadata(BaseModel):
    """Playlist-level snippet returned by the ``playlists`` endpoint."""

    id: str
    title: str
    description: str = ""
    source_url: str


class VideoRecord(BaseModel):
    """One playlist slot, populated from ``videos`` or synthesized as a placeholder."""

    id: str
    title: str
    description: str = ""
    duration_iso8601: Optional[str] = None
    thumbnail_url: str
    watch_url: str
    available: bool = True


class FetchedPlaylist(BaseModel):
    """Playlist metadata plus its deduplicated videos in playlist order."""

    id: str
    title: str
    description: str = ""
    url: str
    videos: List[VideoRecord] = Field(default_factory=list)

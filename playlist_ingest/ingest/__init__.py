"""Playlist ingestion: fetching, projection, and course import."""

from .fetcher import PlaylistFetcher, fetch_playlist, fetch_playlist_sync
from .importer import CourseStore, InMemoryCourseStore, PlaylistImporter
from .projector import project_playlist, project_video

__all__ = [
    "PlaylistFetcher",
    "fetch_playlist",
    "fetch_playlist_sync",
    "project_video",
    "project_playlist",
    "CourseStore",
    "InMemoryCourseStore",
    "PlaylistImporter",
]

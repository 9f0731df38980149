"""Imports a fetched playlist into a course owned by the requesting user."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from ..errors import (
    CourseNotFoundError,
    ImportValidationError,
    IngestError,
    PlaylistNotFoundError,
)
from ..models import FetchStatus, ImportResult
from .fetcher import PlaylistFetcher
from .projector import project_playlist


class CourseStore(Protocol):
    """Persistence operations the importer needs from the host application."""

    def get_course(self, course_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        ...

    def insert_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        ...

    def update_course(self, course_id: str, changes: Dict[str, Any]) -> None:
        ...


class InMemoryCourseStore:
    """Dictionary-backed ``CourseStore`` used by the CLI preview and tests."""

    def __init__(self) -> None:
        self.courses: Dict[str, Dict[str, Any]] = {}
        self.items: List[Dict[str, Any]] = []

    def add_course(self, course_id: str, user_id: str, **fields: Any) -> Dict[str, Any]:
        course = {"id": course_id, "user_id": user_id, **fields}
        self.courses[course_id] = course
        return course

    def get_course(self, course_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        course = self.courses.get(course_id)
        if course is None or course.get("user_id") != user_id:
            return None
        return course

    def insert_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        stored = []
        for item in items:
            row = {"id": f"item_{len(self.items) + 1}", **item}
            self.items.append(row)
            stored.append(row)
        return stored

    def update_course(self, course_id: str, changes: Dict[str, Any]) -> None:
        if course_id not in self.courses:
            raise CourseNotFoundError(f"Course {course_id} does not exist")
        self.courses[course_id].update(changes)


class PlaylistImporter:
    """Fetches a playlist and stores one course item per video."""

    def __init__(self, fetcher: PlaylistFetcher, store: CourseStore) -> None:
        self._fetcher = fetcher
        self._store = store

    async def import_playlist(self, playlist_url: str, course_id: str, user_id: str) -> ImportResult:
        if not playlist_url or not course_id:
            raise ImportValidationError("Playlist URL and course ID are required")

        if self._store.get_course(course_id, user_id) is None:
            raise CourseNotFoundError(f"Course {course_id} not found for user {user_id}")

        outcome = await self._fetcher.fetch(playlist_url)
        if outcome.status is FetchStatus.FAILED:
            logging.error("Playlist import for course %s failed (%s)", course_id, outcome.reason.value)
            outcome.raise_for_failure()
            raise IngestError(f"Playlist fetch failed: {outcome.reason.value}")
        if outcome.status is FetchStatus.NOT_FOUND or outcome.playlist is None:
            raise PlaylistNotFoundError(f"Playlist at {playlist_url} is private, deleted, or does not exist")

        playlist = outcome.playlist
        rows = []
        for draft in project_playlist(playlist):
            row = draft.model_dump()
            row.update(course_id=course_id, user_id=user_id)
            rows.append(row)

        stored = self._store.insert_items(rows) if rows else []
        self._store.update_course(
            course_id,
            {"source_url": playlist_url, "description": playlist.description or None},
        )
        logging.info("Imported %s items from playlist %s into course %s", len(stored), playlist.id, course_id)
        return ImportResult(course_id=course_id, playlist=playlist, items=stored)

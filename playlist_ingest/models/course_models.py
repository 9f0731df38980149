"""Models describing the course items handed to the host application."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .playlist_models import FetchedPlaylist


class CourseItemMetadata(BaseModel):
    """Traceability data linking a course item back to its YouTube source."""

    external_video_id: str
    thumbnail_url: str
    playlist_id: str


class CourseItemDraft(BaseModel):
    """An unsaved course item projected from a playlist video."""

    title: str
    description: str = ""
    item_type: Literal["video"] = "video"
    content_url: str
    duration_minutes: Optional[int] = None
    order_index: int = Field(ge=0)
    metadata: CourseItemMetadata


class ImportResult(BaseModel):
    """Outcome of importing a playlist into an existing course."""

    course_id: str
    playlist: FetchedPlaylist
    items: List[Dict[str, Any]]

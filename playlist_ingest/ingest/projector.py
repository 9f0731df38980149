"""Projects fetched videos onto the host application's course item shape."""

from __future__ import annotations

from typing import List

from ..models import CourseItemDraft, CourseItemMetadata, FetchedPlaylist, VideoRecord
from ..utils.duration import parse_duration_minutes


def project_video(video: VideoRecord, order_index: int, playlist_id: str) -> CourseItemDraft:
    # An absent duration stays None so "unknown" never reads as a zero-length video.
    duration_minutes = parse_duration_minutes(video.duration_iso8601) if video.duration_iso8601 else None
    return CourseItemDraft(
        title=video.title,
        description=video.description,
        item_type="video",
        content_url=video.watch_url,
        duration_minutes=duration_minutes,
        order_index=order_index,
        metadata=CourseItemMetadata(
            external_video_id=video.id,
            thumbnail_url=video.thumbnail_url,
            playlist_id=playlist_id,
        ),
    )


def project_playlist(playlist: FetchedPlaylist) -> List[CourseItemDraft]:
    return [project_video(video, index, playlist.id) for index, video in enumerate(playlist.videos)]

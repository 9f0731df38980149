"""API layer for the YouTube Data API resources used during ingestion."""

from .playlist_api import VIDEO_ID_EXTRACTORS, PlaylistAPI, extract_item_video_id
from .video_api import VideoAPI

__all__ = ["PlaylistAPI", "VideoAPI", "VIDEO_ID_EXTRACTORS", "extract_item_video_id"]

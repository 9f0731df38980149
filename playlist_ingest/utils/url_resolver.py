"""Extract playlist and video identifiers from YouTube URLs."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence

from ..models import PlaylistReference, VideoReference

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"
THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"

# Order matters: the first pattern that matches wins.
PLAYLIST_PATTERNS: Sequence[Pattern[str]] = (
    re.compile(r"[?&]list=([A-Za-z0-9_-]+)"),
    re.compile(r"youtube\.com/playlist\?list=([A-Za-z0-9_-]+)"),
    re.compile(r"youtu\.be/.*[?&]list=([A-Za-z0-9_-]+)"),
)

VIDEO_PATTERNS: Sequence[Pattern[str]] = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([A-Za-z0-9_-]+)"),
    re.compile(r"youtube\.com/embed/([A-Za-z0-9_-]+)"),
)


def _first_match(patterns: Sequence[Pattern[str]], url: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_playlist_id(url: str) -> Optional[str]:
    """Returns the playlist id embedded in ``url`` or ``None``."""

    if not url:
        return None
    return _first_match(PLAYLIST_PATTERNS, url)


def extract_video_id(url: str) -> Optional[str]:
    """Returns the video id of a watch, short, or embed URL, or ``None``."""

    if not url:
        return None
    return _first_match(VIDEO_PATTERNS, url)


def resolve_playlist(url: str) -> Optional[PlaylistReference]:
    playlist_id = extract_playlist_id(url)
    return PlaylistReference(id=playlist_id) if playlist_id else None


def resolve_video(url: str) -> Optional[VideoReference]:
    video_id = extract_video_id(url)
    return VideoReference(id=video_id) if video_id else None


def build_watch_url(video_id: str) -> str:
    return WATCH_URL_TEMPLATE.format(video_id=video_id)


def build_thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)

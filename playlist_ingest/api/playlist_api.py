"""API client for playlist metadata and paginated playlist membership."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..models import PlaylistMetadata
from ..utils.http_client import HttpClient

PLAYLISTS_PATH = "playlists"
PLAYLIST_ITEMS_PATH = "playlistItems"
MAX_PAGE_SIZE = 50

VideoIdExtractor = Callable[[Dict[str, Any]], Optional[str]]


def _from_content_details(item: Dict[str, Any]) -> Optional[str]:
    return (item.get("contentDetails") or {}).get("videoId")


def _from_snippet_resource(item: Dict[str, Any]) -> Optional[str]:
    return ((item.get("snippet") or {}).get("resourceId") or {}).get("videoId")


# Tried in order; append new response variants here.
VIDEO_ID_EXTRACTORS: Sequence[VideoIdExtractor] = (
    _from_content_details,
    _from_snippet_resource,
)


def extract_item_video_id(item: Dict[str, Any], extractors: Sequence[VideoIdExtractor] = VIDEO_ID_EXTRACTORS) -> Optional[str]:
    for extractor in extractors:
        video_id = extractor(item)
        if video_id:
            return str(video_id)
    return None


class PlaylistAPI:
    """Wraps the ``playlists`` and ``playlistItems`` endpoints."""

    def __init__(self, http_client: HttpClient, page_size: int = MAX_PAGE_SIZE) -> None:
        self._client = http_client
        self.page_size = min(max(page_size, 1), MAX_PAGE_SIZE)

    async def get_playlist(self, playlist_id: str, source_url: str) -> Optional[PlaylistMetadata]:
        """Returns the playlist snippet, or ``None`` when the platform reports no match."""

        params = {"part": "snippet", "id": playlist_id}
        try:
            data = await self._client.get_json(PLAYLISTS_PATH, params)
        except Exception as exc:
            logging.error("Failed to fetch playlist %s: %s", playlist_id, exc)
            raise

        items = data.get("items") or []
        if not items:
            logging.info("Playlist %s is private, deleted, or does not exist", playlist_id)
            return None

        snippet = items[0].get("snippet") or {}
        return PlaylistMetadata(
            id=playlist_id,
            title=str(snippet.get("title") or ""),
            description=str(snippet.get("description") or ""),
            source_url=source_url,
        )

    async def list_video_ids(self, playlist_id: str) -> List[str]:
        """Collects member video ids across every page, in the order received.

        Duplicates are kept; callers decide how to collapse them.
        """

        video_ids: List[str] = []
        page_token: Optional[str] = None
        page_number = 0
        while True:
            params = {
                "part": "contentDetails,snippet",
                "maxResults": self.page_size,
                "playlistId": playlist_id,
                "pageToken": page_token,
            }
            try:
                data = await self._client.get_json(PLAYLIST_ITEMS_PATH, params)
            except Exception as exc:
                logging.error("Playlist page %s for %s failed: %s", page_number + 1, playlist_id, exc)
                raise

            page_number += 1
            for item in data.get("items") or []:
                video_id = extract_item_video_id(item)
                if not video_id:
                    logging.debug("Skipping playlist item without a video id: %s", item.get("id"))
                    continue
                video_ids.append(video_id)

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        logging.debug("Collected %s playlist entries over %s page(s)", len(video_ids), page_number)
        return video_ids

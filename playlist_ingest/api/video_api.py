"""API client for batched video detail lookups."""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from ..utils.http_client import HttpClient

VIDEOS_PATH = "videos"
MAX_BATCH_SIZE = 50


class VideoAPI:
    """Fetches snippet and duration details for up to 50 videos per call."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    async def get_video_details(self, video_ids: Sequence[str]) -> Dict[str, Dict[str, Any]]:
        """Returns a lookup from video id to its raw ``videos`` resource.

        Ids the platform no longer serves are simply absent from the lookup.
        """

        if not video_ids:
            return {}
        if len(video_ids) > MAX_BATCH_SIZE:
            raise ValueError(f"At most {MAX_BATCH_SIZE} ids may be requested per call, got {len(video_ids)}")

        params = {"part": "snippet,contentDetails", "id": ",".join(video_ids)}
        try:
            data = await self._client.get_json(VIDEOS_PATH, params)
        except Exception as exc:
            logging.error("Failed to fetch details for %s videos: %s", len(video_ids), exc)
            raise

        details: Dict[str, Dict[str, Any]] = {}
        for item in data.get("items") or []:
            video_id = item.get("id")
            if video_id:
                details[str(video_id)] = item
        return details

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from playlist_ingest.errors import TransportError

PLAYLIST_ID = "PLtest_123-abc"
PLAYLIST_URL = f"https://www.youtube.com/playlist?list={PLAYLIST_ID}"


def video_resource(video_id: str, duration: Optional[str] = "PT5M30S", thumbnails: Optional[dict] = None) -> Dict[str, Any]:
    if thumbnails is None:
        thumbnails = {"high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"}}
    content_details = {"duration": duration} if duration else {}
    return {
        "id": video_id,
        "snippet": {
            "title": f"Video {video_id}",
            "description": f"About {video_id}",
            "thumbnails": thumbnails,
        },
        "contentDetails": content_details,
    }


def membership_item(video_id: str, variant: str = "contentDetails") -> Dict[str, Any]:
    if variant == "contentDetails":
        return {"contentDetails": {"videoId": video_id}, "snippet": {}}
    return {"snippet": {"resourceId": {"kind": "youtube#video", "videoId": video_id}}}


class FakeHttpClient:
    """Serves canned Data API responses and records each request."""

    def __init__(
        self,
        *,
        playlist: Optional[Dict[str, str]] = None,
        member_ids: Optional[List[str]] = None,
        page_size: int = 50,
        missing: Optional[set] = None,
        reverse_details: bool = False,
        fail_on: Optional[Callable[[str, Dict[str, Any], int], Optional[int]]] = None,
    ) -> None:
        self.playlist = playlist
        self.member_ids = member_ids or []
        self.page_size = page_size
        self.missing = missing or set()
        self.reverse_details = reverse_details
        self.fail_on = fail_on
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def __aenter__(self) -> "FakeHttpClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        return None

    def calls_to(self, resource: str) -> List[Dict[str, Any]]:
        return [params for name, params in self.calls if name == resource]

    async def get_json(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((resource, dict(params)))
        if self.fail_on is not None:
            status = self.fail_on(resource, params, len(self.calls_to(resource)))
            if status is not None:
                raise TransportError(f"{resource} returned HTTP {status}", status=status)

        if resource == "playlists":
            if self.playlist is None:
                return {"items": []}
            return {"items": [{"id": params["id"], "snippet": dict(self.playlist)}]}

        if resource == "playlistItems":
            start = int(params.get("pageToken") or 0)
            page = self.member_ids[start : start + self.page_size]
            payload: Dict[str, Any] = {"items": [membership_item(video_id) for video_id in page]}
            if start + self.page_size < len(self.member_ids):
                payload["nextPageToken"] = str(start + self.page_size)
            return payload

        if resource == "videos":
            ids = params["id"].split(",")
            items = [video_resource(video_id) for video_id in ids if video_id not in self.missing]
            if self.reverse_details:
                items.reverse()
            return {"items": items}

        raise AssertionError(f"Unexpected resource {resource}")


@pytest.fixture()
def make_client() -> Callable[..., FakeHttpClient]:
    def _factory(**kwargs: Any) -> FakeHttpClient:
        kwargs.setdefault("playlist", {"title": "Course Playlist", "description": "Everything"})
        return FakeHttpClient(**kwargs)

    return _factory


@pytest.fixture(autouse=True)
def _clear_youtube_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("YOUTUBE_API_KEY", "YOUTUBE_TIMEOUT", "YOUTUBE_MAX_QPS", "YOUTUBE_CONCURRENT_BATCHES", "YOUTUBE_API_BASE"):
        monkeypatch.delenv(name, raising=False)

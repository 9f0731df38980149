"""Three-phase playlist fetch: metadata, paginated membership, batched details."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..api.playlist_api import MAX_PAGE_SIZE, PlaylistAPI
from ..api.video_api import MAX_BATCH_SIZE, VideoAPI
from ..errors import InvalidUrlError, TransportError
from ..models import (
    UNAVAILABLE_TITLE,
    FailureReason,
    FetchedPlaylist,
    FetchOutcome,
    VideoRecord,
)
from ..utils.http_client import HttpClient
from ..utils.settings import IngestSettings
from ..utils.url_resolver import (
    build_thumbnail_url,
    build_watch_url,
    resolve_playlist,
    resolve_video,
)

THUMBNAIL_PREFERENCE = ("maxres", "standard", "high", "medium", "default")


def dedupe_preserving_order(video_ids: Iterable[str]) -> List[str]:
    """Keeps the first occurrence of each id, in original order."""

    seen = set()
    unique: List[str] = []
    for video_id in video_ids:
        if video_id not in seen:
            unique.append(video_id)
            seen.add(video_id)
    return unique


def chunk(values: Sequence[str], size: int) -> List[List[str]]:
    return [list(values[start : start + size]) for start in range(0, len(values), size)]


def pick_thumbnail(video_id: str, thumbnails: Optional[Dict[str, Any]]) -> str:
    thumbnails = thumbnails or {}
    for quality in THUMBNAIL_PREFERENCE:
        url = (thumbnails.get(quality) or {}).get("url")
        if url:
            return url
    return build_thumbnail_url(video_id)


def placeholder_record(video_id: str) -> VideoRecord:
    return VideoRecord(
        id=video_id,
        title=UNAVAILABLE_TITLE,
        description="",
        duration_iso8601=None,
        thumbnail_url=build_thumbnail_url(video_id),
        watch_url=build_watch_url(video_id),
        available=False,
    )


def build_video_record(video_id: str, detail: Dict[str, Any]) -> VideoRecord:
    snippet = detail.get("snippet") or {}
    content_details = detail.get("contentDetails") or {}
    return VideoRecord(
        id=video_id,
        title=str(snippet.get("title") or ""),
        description=str(snippet.get("description") or ""),
        duration_iso8601=content_details.get("duration") or None,
        thumbnail_url=pick_thumbnail(video_id, snippet.get("thumbnails")),
        watch_url=build_watch_url(video_id),
    )


def assemble_batch(video_ids: Sequence[str], details: Dict[str, Dict[str, Any]]) -> List[VideoRecord]:
    """Emits one record per requested id, in request order, regardless of response order."""

    records: List[VideoRecord] = []
    for video_id in video_ids:
        detail = details.get(video_id)
        if detail is None:
            logging.warning("Video %s is unavailable; inserting a placeholder", video_id)
            records.append(placeholder_record(video_id))
        else:
            records.append(build_video_record(video_id, detail))
    return records


class PlaylistFetcher:
    """Collects a complete, deduplicated, order-preserving view of a playlist."""

    def __init__(
        self,
        http_client: HttpClient,
        *,
        page_size: int = MAX_PAGE_SIZE,
        batch_size: int = MAX_BATCH_SIZE,
        concurrent_batches: int = 1,
    ) -> None:
        self._playlist_api = PlaylistAPI(http_client, page_size=page_size)
        self._video_api = VideoAPI(http_client)
        self.batch_size = min(max(batch_size, 1), MAX_BATCH_SIZE)
        self.concurrent_batches = max(concurrent_batches, 1)

    async def fetch(self, playlist_url: str) -> FetchOutcome:
        reference = resolve_playlist(playlist_url)
        if reference is None:
            logging.error("Could not find a playlist id in %s", playlist_url)
            return FetchOutcome.failed(FailureReason.INVALID_URL, InvalidUrlError(playlist_url))

        try:
            playlist = await self._fetch_playlist(reference.id, playlist_url)
        except TransportError as exc:
            return FetchOutcome.failed(FailureReason.TRANSPORT, exc, status_code=exc.status)

        if playlist is None:
            return FetchOutcome.not_found()
        return FetchOutcome.found(playlist)

    async def fetch_video(self, video_url: str) -> VideoRecord:
        """Fetches a single video by URL; an unavailable video yields a placeholder."""

        reference = resolve_video(video_url)
        if reference is None:
            raise InvalidUrlError(video_url, kind="video")
        details = await self._video_api.get_video_details([reference.id])
        return assemble_batch([reference.id], details)[0]

    async def _fetch_playlist(self, playlist_id: str, playlist_url: str) -> Optional[FetchedPlaylist]:
        metadata = await self._playlist_api.get_playlist(playlist_id, playlist_url)
        if metadata is None:
            return None

        collected = await self._playlist_api.list_video_ids(playlist_id)
        video_ids = dedupe_preserving_order(collected)
        logging.info(
            "Playlist %s (%s): %s entries, %s unique videos",
            metadata.title,
            playlist_id,
            len(collected),
            len(video_ids),
        )

        videos = await self._fetch_videos(video_ids) if video_ids else []
        return FetchedPlaylist(
            id=metadata.id,
            title=metadata.title,
            description=metadata.description,
            url=metadata.source_url,
            videos=videos,
        )

    async def _fetch_videos(self, video_ids: List[str]) -> List[VideoRecord]:
        batches = chunk(video_ids, self.batch_size)
        if self.concurrent_batches == 1:
            results = [await self._fetch_batch(batch) for batch in batches]
        else:
            sem = asyncio.Semaphore(self.concurrent_batches)

            async def _bounded(batch: List[str]) -> List[VideoRecord]:
                async with sem:
                    return await self._fetch_batch(batch)

            tasks = [asyncio.ensure_future(_bounded(batch)) for batch in batches]
            try:
                results = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    if not task.done():
                        task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        videos: List[VideoRecord] = []
        for records in results:
            videos.extend(records)
        return videos

    async def _fetch_batch(self, batch: List[str]) -> List[VideoRecord]:
        details = await self._video_api.get_video_details(batch)
        return assemble_batch(batch, details)


async def fetch_playlist(playlist_url: str, *, settings: Optional[IngestSettings] = None) -> FetchOutcome:
    """Runs one fetch with a short-lived client built from ``settings`` (or the environment)."""

    settings = settings or IngestSettings.from_env()
    async with HttpClient.from_settings(settings) as client:
        fetcher = PlaylistFetcher(client, concurrent_batches=settings.concurrent_batches)
        return await fetcher.fetch(playlist_url)


def fetch_playlist_sync(playlist_url: str, *, settings: Optional[IngestSettings] = None) -> FetchOutcome:
    return asyncio.run(fetch_playlist(playlist_url, settings=settings))

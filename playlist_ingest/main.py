from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

from dotenv import load_dotenv

from .errors import IngestError, MissingCredentialError, PlaylistNotFoundError
from .ingest import InMemoryCourseStore, PlaylistFetcher, PlaylistImporter, project_playlist
from .models import CourseItemDraft, FetchStatus, VideoRecord
from .utils.http_client import HttpClient
from .utils.settings import IngestSettings

load_dotenv()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview or import a YouTube playlist as course items.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--playlist-url", help="Playlist URL (any shape containing list=<id>)")
    source.add_argument("--video-url", help="Single watch, youtu.be, or embed URL")
    parser.add_argument("--api-key", default=None, help="YouTube Data API key (defaults to YOUTUBE_API_KEY)")
    parser.add_argument("--course-id", default=os.getenv("COURSE_ID") or None, help="Run a dry import into this course id")
    parser.add_argument("--user-id", default=os.getenv("USER_ID") or "local-user", help="Owner of the dry-import course")
    parser.add_argument(
        "--concurrent-batches",
        type=int,
        default=None,
        help="Number of video-detail batches fetched in parallel (defaults to YOUTUBE_CONCURRENT_BATCHES or 1)",
    )
    parser.add_argument("--json", action="store_true", help="Print course item drafts as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def print_items(drafts: list[CourseItemDraft]) -> None:
    if not drafts:
        logging.info("Playlist has no videos.")
        return
    logging.info("%-5s | %-11s | %-7s | %s", "Order", "Video ID", "Minutes", "Title")
    logging.info("%s", "-" * 80)
    for draft in drafts:
        minutes = "?" if draft.duration_minutes is None else draft.duration_minutes
        logging.info(
            "%-5s | %-11s | %-7s | %s",
            draft.order_index,
            draft.metadata.external_video_id,
            minutes,
            draft.title,
        )


def print_video(video: VideoRecord) -> None:
    logging.info("%s (%s)", video.title, video.id)
    logging.info("  url=%s duration=%s", video.watch_url, video.duration_iso8601 or "unknown")


async def run(args: argparse.Namespace, settings: IngestSettings) -> int:
    async with HttpClient.from_settings(settings) as http_client:
        concurrent_batches = args.concurrent_batches or settings.concurrent_batches
        fetcher = PlaylistFetcher(http_client, concurrent_batches=concurrent_batches)

        if args.video_url:
            video = await fetcher.fetch_video(args.video_url)
            if args.json:
                print(video.model_dump_json(indent=2))
            else:
                print_video(video)
            return EXIT_OK

        if args.course_id:
            store = InMemoryCourseStore()
            store.add_course(args.course_id, args.user_id)
            importer = PlaylistImporter(fetcher, store)
            result = await importer.import_playlist(args.playlist_url, args.course_id, args.user_id)
            if args.json:
                print(json.dumps(result.items, ensure_ascii=False, indent=2))
            else:
                logging.info("Dry import into course %s produced %s items", args.course_id, len(result.items))
            return EXIT_OK

        outcome = await fetcher.fetch(args.playlist_url)
        if outcome.status is FetchStatus.NOT_FOUND:
            logging.error("Playlist not found (private, deleted, or nonexistent).")
            return EXIT_NOT_FOUND
        outcome.raise_for_failure()

        playlist = outcome.playlist
        drafts = project_playlist(playlist)
        if args.json:
            print(json.dumps([draft.model_dump() for draft in drafts], ensure_ascii=False, indent=2))
        else:
            logging.info("Playlist: %s (%s)", playlist.title, playlist.id)
            print_items(drafts)
        return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = IngestSettings.from_env(api_key=args.api_key)
    except MissingCredentialError as exc:
        logging.error("%s", exc)
        return EXIT_FAILURE

    try:
        return asyncio.run(run(args, settings))
    except PlaylistNotFoundError as exc:
        logging.error("%s", exc)
        return EXIT_NOT_FOUND
    except IngestError as exc:
        logging.error("Import failed: %s", exc)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())

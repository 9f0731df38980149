from __future__ import annotations

import pytest

from playlist_ingest.errors import (
    CourseNotFoundError,
    ImportValidationError,
    InvalidUrlError,
    PlaylistNotFoundError,
    TransportError,
)
from playlist_ingest.ingest import InMemoryCourseStore, PlaylistFetcher, PlaylistImporter
from tests.conftest import PLAYLIST_ID, PLAYLIST_URL


@pytest.fixture()
def store() -> InMemoryCourseStore:
    store = InMemoryCourseStore()
    store.add_course("course-1", "user-1", title="My course")
    return store


def _importer(client, store) -> PlaylistImporter:
    return PlaylistImporter(PlaylistFetcher(client), store)


@pytest.mark.asyncio
async def test_import_stores_items_in_playlist_order(make_client, store) -> None:
    client = make_client(member_ids=["A", "B", "A", "C"], missing={"C"})
    result = await _importer(client, store).import_playlist(PLAYLIST_URL, "course-1", "user-1")

    assert result.course_id == "course-1"
    assert result.playlist.id == PLAYLIST_ID
    assert [item["order_index"] for item in result.items] == [0, 1, 2]
    assert [item["metadata"]["external_video_id"] for item in result.items] == ["A", "B", "C"]
    assert all(item["course_id"] == "course-1" and item["user_id"] == "user-1" for item in result.items)
    assert result.items[0]["duration_minutes"] == 6
    assert result.items[2]["duration_minutes"] is None
    assert store.items == result.items

    course = store.courses["course-1"]
    assert course["source_url"] == PLAYLIST_URL
    assert course["description"] == "Everything"


@pytest.mark.asyncio
async def test_import_rejects_missing_fields(make_client, store) -> None:
    importer = _importer(make_client(), store)
    with pytest.raises(ImportValidationError):
        await importer.import_playlist("", "course-1", "user-1")
    with pytest.raises(ImportValidationError):
        await importer.import_playlist(PLAYLIST_URL, "", "user-1")


@pytest.mark.asyncio
async def test_import_requires_course_owned_by_user(make_client, store) -> None:
    client = make_client(member_ids=["A"])
    with pytest.raises(CourseNotFoundError):
        await _importer(client, store).import_playlist(PLAYLIST_URL, "course-1", "someone-else")
    assert client.calls == []


@pytest.mark.asyncio
async def test_import_missing_playlist(make_client, store) -> None:
    client = make_client(playlist=None)
    with pytest.raises(PlaylistNotFoundError):
        await _importer(client, store).import_playlist(PLAYLIST_URL, "course-1", "user-1")
    assert store.items == []
    assert "source_url" not in store.courses["course-1"]


@pytest.mark.asyncio
async def test_import_empty_playlist_still_updates_course(make_client, store) -> None:
    client = make_client(member_ids=[], playlist={"title": "Empty", "description": ""})
    result = await _importer(client, store).import_playlist(PLAYLIST_URL, "course-1", "user-1")

    assert result.items == []
    assert store.courses["course-1"]["source_url"] == PLAYLIST_URL
    assert store.courses["course-1"]["description"] is None


@pytest.mark.asyncio
async def test_import_propagates_hard_failures(make_client, store) -> None:
    importer = _importer(make_client(member_ids=["A"]), store)
    with pytest.raises(InvalidUrlError):
        await importer.import_playlist("https://example.com/nothing", "course-1", "user-1")

    failing = make_client(member_ids=["A"], fail_on=lambda resource, params, count: 500)
    with pytest.raises(TransportError):
        await _importer(failing, store).import_playlist(PLAYLIST_URL, "course-1", "user-1")
    assert store.items == []

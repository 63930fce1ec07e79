# tests/test_document_store.py

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from claro_list.folders.codec import decode_document
from claro_list.folders.document_store import DocumentStore
from claro_list.folders.errors import CorruptStoreError, StoreMissingError
from claro_list.folders.folder_models import DEFAULT_FOLDER_NAMES, Folder

from .fakes import sample_document


@pytest.mark.asyncio
async def test_load_seeds_and_persists_when_missing(store: DocumentStore) -> None:
    assert not store.path.exists()

    doc = await store.load()

    assert [f.name for f in doc] == list(DEFAULT_FOLDER_NAMES)
    assert all(f.tasks == () for f in doc)
    assert len({f.id for f in doc}) == 4
    assert store.path.exists()
    assert await store.read() == doc


@pytest.mark.asyncio
async def test_seeding_is_idempotent(store: DocumentStore) -> None:
    first = await store.load()
    second = await store.load()
    assert first == second


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "blob",
    [
        b"\xff\xfe[{\"id\": \"a\"}]",
        "[" * 100_000 + "]" * 100_000,
        "not json at all",
        '{"folders": []}',
        '[{"id": 1, "name": "x", "tasks": []}]',
        '[{"id": "a", "name": "x", "tasks": [{"id": "t", "name": "y", "completed": "no"}]}]',
        '[{"id": "a", "name": "x", "tasks": []}, {"id": "a", "name": "y", "tasks": []}]',
    ],
)
async def test_corrupt_blob_is_reseeded(store: DocumentStore, blob: str | bytes) -> None:
    store.path.write_bytes(blob if isinstance(blob, bytes) else blob.encode("utf-8"))

    with pytest.raises(CorruptStoreError):
        await store.read()

    doc = await store.load()
    assert [f.name for f in doc] == list(DEFAULT_FOLDER_NAMES)
    # the seed replaced the corrupt blob
    assert await store.read() == doc


@pytest.mark.asyncio
async def test_read_distinguishes_missing(store: DocumentStore) -> None:
    with pytest.raises(StoreMissingError):
        await store.read()


@pytest.mark.asyncio
async def test_save_then_load_round_trip(store: DocumentStore) -> None:
    doc = sample_document()
    await store.save(doc)
    assert await store.load() == doc


@pytest.mark.asyncio
async def test_saved_layout_has_no_version_field(store: DocumentStore) -> None:
    await store.save(sample_document())
    raw = json.loads(store.path.read_text("utf-8"))
    assert isinstance(raw, list)
    assert raw[0] == {
        "id": "f1",
        "name": "Work",
        "tasks": [{"id": "t1", "name": "report", "completed": False}],
    }


def test_decode_defaults_missing_tasks_and_completed() -> None:
    doc = decode_document('[{"id": "f", "name": "F"}, {"id": "g", "name": "G", "tasks": [{"id": "t", "name": "T"}]}]')
    assert doc[0].tasks == ()
    assert doc[1].tasks[0].completed is False


@pytest.mark.asyncio
async def test_save_failure_is_swallowed(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", "utf-8")
    store = DocumentStore(blocker / "folders.json")
    seen = []
    store.subscribe(seen.append)

    await store.save(sample_document())  # must not raise

    assert seen == []
    assert not (blocker / "folders.json").exists()


@pytest.mark.asyncio
async def test_load_still_returns_seed_when_write_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", "utf-8")
    store = DocumentStore(blocker / "folders.json")

    doc = await store.load()

    assert [f.name for f in doc] == list(DEFAULT_FOLDER_NAMES)


@pytest.mark.asyncio
async def test_listeners_are_notified_after_save(store: DocumentStore) -> None:
    seen = []

    def broken(_doc) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    unsubscribe = store.subscribe(seen.append)

    doc = sample_document()
    await store.save(doc)
    assert seen == [doc]

    unsubscribe()
    await store.save(())
    assert seen == [doc]


@pytest.mark.asyncio
async def test_custom_default_folders(tmp_path: Path) -> None:
    store = DocumentStore(tmp_path / "folders.json", default_folders=["Inbox", "Later"])
    doc = await store.load()
    assert [f.name for f in doc] == ["Inbox", "Later"]


@pytest.mark.asyncio
async def test_overlapping_saves_all_land_in_order(store: DocumentStore) -> None:
    docs = [(Folder(id=f"f{i}", name=f"folder {i}"),) for i in range(8)]
    seen = []
    store.subscribe(seen.append)

    await asyncio.gather(*(store.save(d) for d in docs))

    assert seen == docs
    assert await store.read() == docs[-1]
    assert [p.name for p in store.path.parent.iterdir() if p.suffix == ".tmp"] == []


@pytest.mark.asyncio
async def test_store_and_wired_app_seed_alike(settings, store: DocumentStore, state) -> None:
    from_fixture = await store.load()
    from_app = await state.store.load()
    assert [f.name for f in from_fixture] == [f.name for f in from_app] == list(settings.default_folders)

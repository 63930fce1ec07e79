# src/claro_list/core/views.py

"""
View-side holders of the document.

Each view keeps its OWN cached copy of the document:
- FolderBoard (folder/task editor) loads once on mount and then mutates its cache,
- AllTasksBoard (flattened "all tasks") reloads every time it is activated.

Two boards of the same process therefore follow last-writer-wins: a board
saving from a stale cache overwrites whatever another board saved meanwhile.
Pass live=True to keep a board's cache in sync through the store's change
channel instead.
"""

from __future__ import annotations

import logging

from ..folders.folder_models import Document, FlattenedTask, Folder, Task
from ..folders.folder_repo import FolderRepository, find_by_id
from ..folders.projector import project
from ..folders.task_repo import TaskRepository, find_task
from .ports import DocumentRepo, Unsubscribe

logger = logging.getLogger(__name__)


class _Board:
    def __init__(self, store: DocumentRepo, *, live: bool = False) -> None:
        self.store = store
        self.folders = FolderRepository(store)
        self.tasks = TaskRepository(store)
        self._doc: Document | None = None
        self._unsubscribe: Unsubscribe | None = None

        if live:
            subscribe = getattr(store, "subscribe", None)
            if subscribe is None:
                raise TypeError(f"{type(store).__name__} has no change channel to follow")
            self._unsubscribe = subscribe(self._on_saved)

    def _on_saved(self, doc: Document) -> None:
        self._adopt(doc)

    def _adopt(self, doc: Document) -> None:
        self._doc = doc

    @property
    def loaded(self) -> bool:
        return self._doc is not None

    @property
    def document(self) -> Document:
        if self._doc is None:
            raise RuntimeError(f"{type(self).__name__} is not loaded yet")
        return self._doc

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


class FolderBoard(_Board):
    """Folder/task editor: load once, then work on the cached document."""

    async def mount(self) -> Document:
        if self._doc is None:
            self._adopt(await self.store.load())
        return self.document

    async def reload(self) -> Document:
        self._adopt(await self.store.load())
        return self.document

    async def _cached(self) -> Document:
        return await self.mount()

    def folder_tasks(self, folder_id: str) -> tuple[Folder, tuple[Task, ...]] | None:
        """Open a folder: its display name and tasks (None for a stale id)."""
        folder = find_by_id(self.document, folder_id)
        if folder is None:
            return None
        return folder, folder.tasks

    async def create_or_rename_folder(self, name: str, folder_id: str | None = None) -> Document:
        doc = await self.folders.create_or_rename(await self._cached(), folder_id, name)
        self._adopt(doc)
        return doc

    async def delete_folder(self, folder_id: str) -> Document:
        doc = await self.folders.delete(await self._cached(), folder_id)
        self._adopt(doc)
        return doc

    async def add_task(self, folder_id: str, name: str) -> Document:
        doc = await self.tasks.add_task(await self._cached(), folder_id, name)
        self._adopt(doc)
        return doc

    async def toggle_task(self, task_id: str, folder_id: str | None = None) -> Document:
        cached = await self._cached()
        folder_id = folder_id or self._owner_of(cached, task_id)
        doc = await self.tasks.toggle_completed(cached, task_id, folder_id)
        self._adopt(doc)
        return doc

    async def delete_task(self, task_id: str, folder_id: str | None = None) -> Document:
        cached = await self._cached()
        folder_id = folder_id or self._owner_of(cached, task_id)
        doc = await self.tasks.delete_task(cached, task_id, folder_id)
        self._adopt(doc)
        return doc

    @staticmethod
    def _owner_of(doc: Document, task_id: str) -> str:
        found = find_task(doc, task_id)
        return found[0].id if found else ""


class AllTasksBoard(_Board):
    """Flattened view across folders; recomputed on every activation."""

    def __init__(self, store: DocumentRepo, *, live: bool = False) -> None:
        self.entries: list[FlattenedTask] = []
        super().__init__(store, live=live)

    def _adopt(self, doc: Document) -> None:
        super()._adopt(doc)
        self.entries = project(doc)

    async def activate(self) -> list[FlattenedTask]:
        self._adopt(await self.store.load())
        return self.entries

    async def toggle(self, entry: FlattenedTask) -> list[FlattenedTask]:
        # Fresh load-mutate-save keyed by the entry's source folder.
        doc = await self.tasks.toggle_completed(None, entry.id, entry.folder_id)
        self._adopt(doc)
        return self.entries

    async def delete(self, entry: FlattenedTask) -> list[FlattenedTask]:
        doc = await self.tasks.delete_task(None, entry.id, entry.folder_id)
        self._adopt(doc)
        return self.entries

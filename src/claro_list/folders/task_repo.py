# src/claro_list/folders/task_repo.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import DocumentRepo
from .errors import ValidationError
from .folder_models import Document, Folder, Task, new_id
from .folder_repo import clean_name, find_by_id, replace_folder

logger = logging.getLogger(__name__)


def find_task(doc: Document, task_id: str) -> tuple[Folder, Task] | None:
    """Linear scan across all folders (task ids are document-wide unique)."""
    for folder in doc:
        for task in folder.tasks:
            if task.id == task_id:
                return folder, task
    return None


# ---- pure transformations (no I/O) ----


def append_task(doc: Document, folder: Folder, task: Task) -> Document:
    return replace_folder(doc, replace(folder, tasks=(*folder.tasks, task)))


def flip_task(doc: Document, folder: Folder, task_id: str) -> Document:
    tasks = tuple(
        replace(t, completed=not t.completed) if t.id == task_id else t for t in folder.tasks
    )
    return replace_folder(doc, replace(folder, tasks=tasks))


def remove_task(doc: Document, folder: Folder, task_id: str) -> Document:
    tasks = tuple(t for t in folder.tasks if t.id != task_id)
    return replace_folder(doc, replace(folder, tasks=tasks))


class TaskRepository:
    """
    CRUD over a folder's nested task list.

    Tasks are addressed by (task_id, folder_id). A stale id (folder or task
    deleted meanwhile) is a silent no-op: nothing is written and the given
    document object is returned as-is.
    """

    def __init__(self, store: DocumentRepo, *, id_factory: Callable[[], str] = new_id) -> None:
        self._store = store
        self._new_id = id_factory

    async def _current(self, doc: Document | None) -> Document:
        return await self._store.load() if doc is None else doc

    async def add_task(self, doc: Document | None, folder_id: str, name: str) -> Document:
        cleaned = clean_name(name, "task")
        current = await self._current(doc)

        folder = find_by_id(current, folder_id)
        if folder is None:
            raise ValidationError("Please choose an existing folder")

        task = Task(id=self._new_id(), name=cleaned)
        updated = append_task(current, folder, task)
        await self._store.save(updated)
        logger.debug("Task added id=%s folder=%s", task.id, folder_id)
        return updated

    def _locate(self, doc: Document, task_id: str, folder_id: str, op: str) -> Folder | None:
        folder = find_by_id(doc, folder_id)
        if folder is None:
            logger.info("%s: folder id=%s not found, nothing to do", op, folder_id)
            return None
        if not any(t.id == task_id for t in folder.tasks):
            logger.info("%s: task id=%s not in folder id=%s, nothing to do", op, task_id, folder_id)
            return None
        return folder

    async def toggle_completed(self, doc: Document | None, task_id: str, folder_id: str) -> Document:
        current = await self._current(doc)
        folder = self._locate(current, task_id, folder_id, "toggle task")
        if folder is None:
            return current

        updated = flip_task(current, folder, task_id)
        await self._store.save(updated)
        logger.debug("Task toggled id=%s folder=%s", task_id, folder_id)
        return updated

    async def delete_task(self, doc: Document | None, task_id: str, folder_id: str) -> Document:
        current = await self._current(doc)
        folder = self._locate(current, task_id, folder_id, "delete task")
        if folder is None:
            return current

        updated = remove_task(current, folder, task_id)
        await self._store.save(updated)
        logger.debug("Task deleted id=%s folder=%s", task_id, folder_id)
        return updated

# src/claro_list/folders/folder_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass

DEFAULT_FOLDER_NAMES: tuple[str, ...] = ("Not Important", "Important", "Not Urgent", "Urgent")


def new_id() -> str:
    """Collision-resistant id for folders and tasks (random, not time based)."""
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    name: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class Folder:
    """
    Named grouping owning an ordered list of tasks.

    Folders and tasks are immutable values: every mutation builds a new
    Folder (see dataclasses.replace), so a Document held by one view can
    never be changed underneath it by another.
    """

    id: str
    name: str
    tasks: tuple[Task, ...] = ()


@dataclass(frozen=True, slots=True)
class FlattenedTask:
    """Task tagged with its source folder id. Read-time only, never persisted."""

    id: str
    name: str
    completed: bool
    folder_id: str


# The whole persisted collection: ordered folders.
Document = tuple[Folder, ...]


def seed_document(names: tuple[str, ...] | list[str] = DEFAULT_FOLDER_NAMES) -> Document:
    return tuple(Folder(id=new_id(), name=name) for name in names)

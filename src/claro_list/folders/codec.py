# src/claro_list/folders/codec.py

"""
Typed JSON codec for the folder document.

Layout (no version field, no checksum):

    [{"id": "...", "name": "...",
      "tasks": [{"id": "...", "name": "...", "completed": false}]}]

decode_document() never guesses: anything that does not match the layout
raises CorruptStoreError, so the store can tell "corrupt" from "missing".
"""

from __future__ import annotations

import json
from typing import Any

from .errors import CorruptStoreError
from .folder_models import Document, Folder, Task


def _require_str(raw: dict[str, Any], key: str, where: str) -> str:
    val = raw.get(key)
    if not isinstance(val, str):
        raise CorruptStoreError(f"{where}: '{key}' must be a string, got {type(val).__name__}")
    return val


def _decode_task(raw: Any, where: str) -> Task:
    if not isinstance(raw, dict):
        raise CorruptStoreError(f"{where}: task must be an object")
    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise CorruptStoreError(f"{where}: 'completed' must be a boolean")
    return Task(
        id=_require_str(raw, "id", where),
        name=_require_str(raw, "name", where),
        completed=completed,
    )


def _decode_folder(raw: Any, where: str) -> Folder:
    if not isinstance(raw, dict):
        raise CorruptStoreError(f"{where}: folder must be an object")
    tasks_raw = raw.get("tasks", [])
    if not isinstance(tasks_raw, list):
        raise CorruptStoreError(f"{where}: 'tasks' must be a list")
    tasks = tuple(_decode_task(t, f"{where}.tasks[{i}]") for i, t in enumerate(tasks_raw))
    return Folder(
        id=_require_str(raw, "id", where),
        name=_require_str(raw, "name", where),
        tasks=tasks,
    )


def decode_document(text: str) -> Document:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise CorruptStoreError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise CorruptStoreError("JSON nested too deeply") from e

    if not isinstance(data, list):
        raise CorruptStoreError("document must be a list of folders")

    doc = tuple(_decode_folder(f, f"folders[{i}]") for i, f in enumerate(data))

    # Id uniqueness is part of the layout contract.
    folder_ids = [f.id for f in doc]
    if len(set(folder_ids)) != len(folder_ids):
        raise CorruptStoreError("duplicate folder id")
    task_ids = [t.id for f in doc for t in f.tasks]
    if len(set(task_ids)) != len(task_ids):
        raise CorruptStoreError("duplicate task id")

    return doc


def encode_document(doc: Document) -> str:
    data = [
        {
            "id": folder.id,
            "name": folder.name,
            "tasks": [
                {"id": task.id, "name": task.name, "completed": task.completed}
                for task in folder.tasks
            ],
        }
        for folder in doc
    ]
    return json.dumps(data, ensure_ascii=False, indent=2)

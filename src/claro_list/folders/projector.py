# src/claro_list/folders/projector.py

from __future__ import annotations

from .folder_models import Document, FlattenedTask


def project(doc: Document) -> list[FlattenedTask]:
    """
    Flatten every folder's tasks (folder order, then task order), tagging
    each with its source folder id.

    Pure function: a fresh list on every call. Writes from the flattened
    view go back through TaskRepository using `folder_id`.
    """
    return [
        FlattenedTask(id=task.id, name=task.name, completed=task.completed, folder_id=folder.id)
        for folder in doc
        for task in folder.tasks
    ]

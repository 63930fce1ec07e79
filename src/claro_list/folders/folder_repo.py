# src/claro_list/folders/folder_repo.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import DocumentRepo
from .errors import ValidationError
from .folder_models import Document, Folder, new_id

logger = logging.getLogger(__name__)


def find_by_id(doc: Document, folder_id: str | None) -> Folder | None:
    if not folder_id:
        return None
    for folder in doc:
        if folder.id == folder_id:
            return folder
    return None


def clean_name(name: str | None, what: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"Please enter a {what} name")
    return cleaned


# ---- pure transformations (no I/O) ----


def rename_folder(doc: Document, folder_id: str, name: str) -> Document:
    return tuple(replace(f, name=name) if f.id == folder_id else f for f in doc)


def append_folder(doc: Document, folder: Folder) -> Document:
    return (*doc, folder)


def remove_folder(doc: Document, folder_id: str) -> Document:
    # Tasks are owned by the folder, so they go with it.
    return tuple(f for f in doc if f.id != folder_id)


def replace_folder(doc: Document, folder: Folder) -> Document:
    return tuple(folder if f.id == folder.id else f for f in doc)


class FolderRepository:
    """
    CRUD over the top-level folder list.

    Every mutation is: current document -> new document -> save(whole document).
    Callers that already hold a document (the views) pass it in; with doc=None
    the current document is loaded first.
    """

    def __init__(self, store: DocumentRepo, *, id_factory: Callable[[], str] = new_id) -> None:
        self._store = store
        self._new_id = id_factory

    async def _current(self, doc: Document | None) -> Document:
        return await self._store.load() if doc is None else doc

    async def create_or_rename(
        self,
        doc: Document | None,
        existing_folder_id: str | None,
        name: str,
    ) -> Document:
        """
        Rename the folder `existing_folder_id` or, if it is None / unknown,
        append a new empty folder. Raises ValidationError on a blank name.
        """
        cleaned = clean_name(name, "folder")
        current = await self._current(doc)

        if find_by_id(current, existing_folder_id) is not None:
            updated = rename_folder(current, existing_folder_id, cleaned)  # type: ignore[arg-type]
            logger.debug("Folder renamed id=%s name=%r", existing_folder_id, cleaned)
        else:
            folder = Folder(id=self._new_id(), name=cleaned)
            updated = append_folder(current, folder)
            logger.debug("Folder created id=%s name=%r", folder.id, cleaned)

        await self._store.save(updated)
        return updated

    async def delete(self, doc: Document | None, folder_id: str) -> Document:
        current = await self._current(doc)
        if find_by_id(current, folder_id) is None:
            logger.info("delete folder: id=%s not found, nothing to do", folder_id)
            return current

        updated = remove_folder(current, folder_id)
        await self._store.save(updated)
        logger.debug("Folder deleted id=%s", folder_id)
        return updated

    async def find_by_id(self, doc: Document | None, folder_id: str) -> Folder | None:
        return find_by_id(await self._current(doc), folder_id)

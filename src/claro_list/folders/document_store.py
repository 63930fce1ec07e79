# src/claro_list/folders/document_store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..core.ports import DocumentListener, Unsubscribe
from .codec import decode_document, encode_document
from .errors import CorruptStoreError, StoreMissingError
from .folder_models import DEFAULT_FOLDER_NAMES, Document, seed_document

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    JSON file store for the folder document.

    The whole document is one unit of storage:
    - load() reads and decodes everything (seeding defaults if missing/corrupt)
    - save() encodes and overwrites everything (no merge, no version check)

    Concurrency:
    - file I/O runs in a worker thread; load/save are the only awaitables
    - saves of one store are serialized (one write at a time, listeners in save order)
    - there is no cross-view merge: the last save wins
    """

    def __init__(
        self,
        path: str | Path = "folders.json",
        *,
        default_folders: Sequence[str] = DEFAULT_FOLDER_NAMES,
    ) -> None:
        self._path = Path(path)
        self._default_folders = tuple(default_folders)
        self._listeners: list[DocumentListener] = []
        self._save_lock = asyncio.Lock()
        logger.info("DocumentStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_text(self) -> str:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError as e:
            raise StoreMissingError(str(self._path)) from e
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptStoreError(f"not UTF-8: {e}") from e

    def _write_text(self, text: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Unique temp file per write, in the target dir so os.replace stays atomic.
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=self._path.name + ".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, self._path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.remove(tmp)
            raise

    def _notify(self, doc: Document) -> None:
        for listener in list(self._listeners):
            try:
                listener(doc)
            except Exception:
                logger.exception("Document listener %r failed", listener)

    # ---- public API ----

    async def read(self) -> Document:
        """
        Strict read: raises StoreMissingError / CorruptStoreError.

        Use load() for the usual "recover by seeding" behaviour.
        """
        text = await asyncio.to_thread(self._read_text)
        return decode_document(text)

    async def load(self) -> Document:
        try:
            doc = await self.read()
            logger.debug("Loaded document: %d folders from %s", len(doc), self._path)
            return doc
        except StoreMissingError:
            logger.info("No document at %s; seeding default folders.", self._path)
        except CorruptStoreError as e:
            logger.warning("Corrupt document at %s (%s); seeding default folders.", self._path, e)
        except OSError:
            logger.exception("Failed to read document at %s; seeding default folders.", self._path)

        doc = seed_document(self._default_folders)
        await self.save(doc)
        return doc

    async def save(self, doc: Document) -> None:
        """Overwrite the persisted document. Failures are logged, never raised."""
        async with self._save_lock:
            try:
                text = encode_document(doc)
                await asyncio.to_thread(self._write_text, text)
            except Exception:
                logger.exception("Failed to save document to %s", self._path)
                return
            logger.debug("Saved document: %d folders to %s", len(doc), self._path)
            self._notify(doc)

    def subscribe(self, listener: DocumentListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

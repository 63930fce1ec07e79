# src/claro_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the repositories and views.

Repositories depend on a DocumentRepo Protocol instead of the concrete
JSON file store. This keeps storage swappable and makes testing easier.
"""

from typing import Callable, Protocol

from ..folders.folder_models import Document

DocumentListener = Callable[[Document], None]
Unsubscribe = Callable[[], None]


class DocumentRepo(Protocol):
    """Whole-document persistence: read it all, write it all."""

    async def load(self) -> Document: ...
    async def save(self, doc: Document) -> None: ...


# src/claro_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..folders.document_store import DocumentStore
from .views import AllTasksBoard, FolderBoard


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    store: DocumentStore
    board: FolderBoard
    all_tasks: AllTasksBoard

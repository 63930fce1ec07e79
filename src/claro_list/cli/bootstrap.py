# src/claro_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the document store and both views into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.views import AllTasksBoard, FolderBoard
from ..folders.document_store import DocumentStore
from ..folders.folder_models import DEFAULT_FOLDER_NAMES

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.document_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = DocumentStore(
        settings.document_path,
        default_folders=getattr(settings, "default_folders", DEFAULT_FOLDER_NAMES),
    )
    state = AppState(
        settings=settings,
        store=store,
        board=FolderBoard(store),
        all_tasks=AllTasksBoard(store),
    )
    logger.debug("AppState created document=%s", settings.document_path)
    return state

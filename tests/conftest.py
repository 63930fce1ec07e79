# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from claro_list.cli.bootstrap import create_initial_state
from claro_list.core.state import AppState
from claro_list.folders.document_store import DocumentStore
from claro_list.folders.folder_models import DEFAULT_FOLDER_NAMES
from claro_list.folders.folder_repo import FolderRepository
from claro_list.folders.task_repo import TaskRepository

from .fakes import FakeDocumentRepo, counter_ids


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Claro-List",
        log_level="INFO",
        console_enabled=False,
        data_dir=tmp_path,
        document_path=tmp_path / "folders.json",
        default_folders=DEFAULT_FOLDER_NAMES,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> DocumentStore:
    return DocumentStore(settings.document_path, default_folders=settings.default_folders)


@pytest.fixture()
def fake_repo() -> FakeDocumentRepo:
    return FakeDocumentRepo()


@pytest.fixture()
def folder_repo(fake_repo: FakeDocumentRepo) -> FolderRepository:
    return FolderRepository(fake_repo, id_factory=counter_ids("f"))


@pytest.fixture()
def task_repo(fake_repo: FakeDocumentRepo) -> TaskRepository:
    return TaskRepository(fake_repo, id_factory=counter_ids("t"))


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with the real JSON store under tmp_path."""
    return create_initial_state(settings=settings)

# src/claro_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a local default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .folders.folder_models import DEFAULT_FOLDER_NAMES

ENV_PREFIX = "CLARO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_names(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    # Comma separated: folder names may contain spaces ("Not Important").
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    parts = tuple(p.strip() for p in raw.split(",") if p.strip())
    return parts or default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    document_path: Path

    # ---- Seeding ----
    default_folders: tuple[str, ...]

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/claro"))
        return Settings(
            app_name=_env(_k("APP_NAME"), "Claro-List"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), True),
            data_dir=data_dir,
            document_path=_env_path(_k("DOCUMENT_PATH"), data_dir / "folders.json"),
            default_folders=_env_names(_k("DEFAULT_FOLDERS"), DEFAULT_FOLDER_NAMES),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

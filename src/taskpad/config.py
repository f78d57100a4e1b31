# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Every value has a local default; nothing is required to start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import DEFAULT_PAGE_SIZE, DEFAULT_STORAGE_KEY

ENV_PREFIX = "TASKPAD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


class StorageBackend(StrEnum):
    """Where the serialized task list lives."""

    JSON = "json"
    SQLITE = "sqlite"

    @classmethod
    def from_env(cls, raw: str | None) -> StorageBackend:
        if not raw:
            return cls.JSON
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.JSON

    @property
    def default_filename(self) -> str:
        return "todos.sqlite3" if self is StorageBackend.SQLITE else "todos.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Persistence ----
    storage_backend: StorageBackend
    storage_path: Path
    storage_key: str

    # ---- View ----
    page_size: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))

        storage_backend = StorageBackend.from_env(os.getenv(_k("STORAGE_BACKEND")))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / storage_backend.default_filename)
        storage_key = _env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY).strip() or DEFAULT_STORAGE_KEY

        page_size = _env_int(_k("PAGE_SIZE"), DEFAULT_PAGE_SIZE)
        if page_size < 1:
            page_size = DEFAULT_PAGE_SIZE

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            page_size=page_size,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

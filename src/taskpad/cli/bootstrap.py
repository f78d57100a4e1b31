# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the storage backend and wires it into the TaskStore / AppState.
"""

from __future__ import annotations

import logging

from ..config import StorageBackend, get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.json_file import JsonFileStorage
from ..storage.sqlite_kv import SqliteKeyValueStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def open_storage(settings) -> KeyValueStorage:
    backend = StorageBackend.from_env(str(getattr(settings, "storage_backend", "") or ""))
    if backend is StorageBackend.SQLITE:
        return SqliteKeyValueStorage(settings.storage_path)
    return JsonFileStorage(settings.storage_path)


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if storage is None:
        storage = open_storage(settings)

    store = TaskStore(storage, key=settings.storage_key, page_size=settings.page_size)
    logger.debug(
        "State wired: backend=%s path=%s page_size=%s",
        getattr(settings, "storage_backend", "?"),
        settings.storage_path,
        settings.page_size,
    )
    return AppState(settings=settings, storage=storage, store=store)

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_backend="json",
        storage_path=tmp_path / "data" / "todos.json",
        storage_key="todos",
        page_size=10,
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def store(storage: FakeStorage) -> TaskStore:
    return TaskStore(storage, key="todos", page_size=10)


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FakeStorage, store: TaskStore) -> AppState:
    """AppState wired with the in-memory fake storage."""
    return AppState(settings=settings, storage=storage, store=store)

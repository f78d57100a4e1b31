# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import KeyValueStorage


@dataclass
class AppState:
    """
    Application state container.

    Intentionally lightweight: it only carries references to settings and
    the long-lived services. Task state itself lives in the store.
    """

    settings: Any
    storage: KeyValueStorage
    store: TaskStore

    @property
    def page_size(self) -> int:
        return self.store.page_size

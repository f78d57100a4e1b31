# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends and views swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import StoreSnapshot


class KeyValueStorage(Protocol):
    """
    String key-value store holding the serialized task list.

    The store reads one key at startup and rewrites it in full after
    every mutation (last write wins).
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class StoreListener(Protocol):
    """View-side hook: called with a fresh snapshot after every state change."""

    def __call__(self, snapshot: StoreSnapshot) -> None: ...

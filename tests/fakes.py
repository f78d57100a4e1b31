# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskpad.tasks.task_models import StoreSnapshot


@dataclass(slots=True)
class FakeStorage:
    """
    In-memory KeyValueStorage for unit tests.

    - Captures every write for assertions
    """

    data: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append((key, value))


class RecordingListener:
    """Store listener that keeps every snapshot it receives."""

    def __init__(self) -> None:
        self.snapshots: list[StoreSnapshot] = []

    def __call__(self, snapshot: StoreSnapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> StoreSnapshot:
        return self.snapshots[-1]

# src/taskpad/tasks/task_models.py

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_STORAGE_KEY = "todos"


class ValidationError(ValueError):
    """Rejected user input. The message is meant to be shown to the user."""


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    name: str
    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "name": self.name, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task | None:
        """Build a Task from a persisted record; None if it has no usable id."""
        tid = raw.get("id")
        # bool is an int subclass; reject it explicitly
        if not isinstance(tid, int) or isinstance(tid, bool):
            return None
        return cls(
            id=tid,
            name=_as_text(raw.get("name")),
            text=_as_text(raw.get("text")),
            completed=raw.get("completed") is True,
        )


@dataclass(frozen=True, slots=True)
class TaskPage:
    """One page of the filtered view plus the size of the whole filtered view."""

    tasks: list[Task]
    total: int
    page: int
    page_size: int

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.page_size)

    def __iter__(self) -> Iterator[Any]:
        # allows `tasks, total = store.query()`
        yield self.tasks
        yield self.total


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    tasks: tuple[Task, ...]
    search_term: str
    current_page: int
    editing_id: int | None
    draft_name: str
    draft_text: str
    error_message: str

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


def dump_tasks(tasks: Iterable[Task]) -> str:
    """Serialize the collection to the persisted JSON array form."""
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def load_tasks(blob: str | None) -> list[Task]:
    """
    Parse a persisted blob (best-effort).

    - None / empty -> []
    - undecodable JSON or non-list payload -> [] (logged)
    - records without an integer id, or repeating an id seen earlier, are skipped
    """
    if not blob:
        return []

    try:
        data = json.loads(blob)
    except ValueError:
        logger.exception("Persisted task list is not valid JSON; starting empty.")
        return []

    if not isinstance(data, list):
        logger.warning("Persisted task list has type %s, expected list; starting empty.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[int] = set()
    for raw in data:
        if not isinstance(raw, dict):
            logger.warning("Skipping persisted task record of type %s", type(raw).__name__)
            continue
        task = Task.from_dict(raw)
        if task is None:
            logger.warning("Skipping persisted task without integer id: %r", raw)
            continue
        if task.id in seen:
            logger.warning("Skipping persisted task with duplicate id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out

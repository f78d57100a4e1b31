# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import KeyValueStorage, StoreListener
from .task_models import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_STORAGE_KEY,
    StoreSnapshot,
    Task,
    TaskPage,
    ValidationError,
    dump_tasks,
    load_tasks,
)

logger = logging.getLogger(__name__)

MSG_MISSING_FIELDS = "Please enter both a name and a task."
MSG_INVALID_NAME = "Please enter a valid name."

# Whole-string number literals: decimals with optional fraction and exponent, signed
# Infinity, 0x/0o/0b integers. "NaN" and digit separators do not count.
_NUMERIC_RE = re.compile(
    r"""
    [+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
    | 0[xX][0-9a-fA-F]+
    | 0[oO][0-7]+
    | 0[bB][01]+
    """,
    re.VERBOSE,
)


def is_numeric_name(name: str) -> bool:
    return _NUMERIC_RE.fullmatch(name.strip()) is not None


def validate_new_task(name: str, text: str) -> None:
    """Raise ValidationError if (name, text) cannot become a task."""
    if not (text or "").strip() or not (name or "").strip():
        raise ValidationError(MSG_MISSING_FIELDS)
    if is_numeric_name(name):
        raise ValidationError(MSG_INVALID_NAME)


class TaskStore:
    """
    In-memory task list with persistence on every mutation.

    Owns:
    - the ordered task collection (insertion order)
    - transient view state: search term, current page, edit drafts, error message

    Persistence:
    - reads `key` from storage once, at construction
    - rewrites the full serialized collection after every mutation

    Not thread-safe: one interactive session owns the store.
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")

        self._storage = storage
        self._key = key
        self._page_size = page_size
        self._listeners: list[StoreListener] = []

        self._tasks: list[Task] = load_tasks(storage.get(key)) if storage is not None else []

        self.search_term = ""
        self.current_page = 1
        self.editing_id: int | None = None
        self.draft_name = ""
        self.draft_text = ""
        self.error_message = ""

        logger.info("TaskStore ready key=%s total=%s", key, len(self._tasks))

    # ---- low-level helpers ----

    def _index(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _find(self, task_id: int) -> Task | None:
        i = self._index(task_id)
        return None if i is None else self._tasks[i]

    def _next_id(self) -> int:
        return max((t.id for t in self._tasks), default=0) + 1

    def _persist(self) -> None:
        if self._storage is None:
            return
        self._storage.set(self._key, dump_tasks(self._tasks))
        logger.debug("Persisted %d tasks under key=%s", len(self._tasks), self._key)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Store listener %r failed.", listener)

    def _clear_edit(self) -> None:
        self.editing_id = None
        self.draft_name = ""
        self.draft_text = ""

    # ---- observation ----

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            tasks=tuple(self._tasks),
            search_term=self.search_term,
            current_page=self.current_page,
            editing_id=self.editing_id,
            draft_name=self.draft_name,
            draft_text=self.draft_text,
            error_message=self.error_message,
        )

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- mutations ----

    def add(self, name: str, text: str) -> Task | None:
        """
        Validate and append a new task.

        On invalid input sets `error_message` and returns None;
        the collection is left untouched.
        """
        try:
            validate_new_task(name, text)
        except ValidationError as e:
            self.error_message = str(e)
            logger.info("Task rejected: %s (name=%r)", e, name)
            self._notify()
            return None

        self.error_message = ""
        task = Task(id=self._next_id(), name=name, text=text)
        self._tasks.append(task)
        logger.debug("Task added id=%s name=%r", task.id, task.name)
        self._persist()
        self._notify()
        return task

    def toggle_complete(self, task_id: int) -> None:
        i = self._index(task_id)
        if i is not None:
            task = self._tasks[i]
            self._tasks[i] = replace(task, completed=not task.completed)
            logger.debug("Task toggled id=%s completed=%s", task_id, self._tasks[i].completed)
        self._persist()
        self._notify()

    def delete(self, task_id: int) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) != before:
            logger.debug("Task deleted id=%s", task_id)
        self._persist()
        self._notify()

    def begin_edit(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        self.editing_id = task.id
        self.draft_name = task.name
        self.draft_text = task.text
        self._notify()
        return True

    def update_draft(self, *, name: str | None = None, text: str | None = None) -> bool:
        if self.editing_id is None:
            return False
        if name is not None:
            self.draft_name = name
        if text is not None:
            self.draft_text = text
        self._notify()
        return True

    def commit_edit(self) -> bool:
        """
        Write the drafts into the task being edited.

        Drafts are not re-validated. If the task is gone, only the edit
        state is cleared. Returns False when nothing was being edited.
        """
        if self.editing_id is None:
            return False

        i = self._index(self.editing_id)
        if i is not None:
            self._tasks[i] = replace(self._tasks[i], name=self.draft_name, text=self.draft_text)
            logger.debug("Task updated id=%s", self.editing_id)
        else:
            logger.debug("Edit target id=%s vanished; nothing to update", self.editing_id)

        self._clear_edit()
        self._persist()
        self._notify()
        return True

    def cancel_edit(self) -> None:
        self._clear_edit()
        self._notify()

    # ---- view state ----

    def set_search_term(self, term: str) -> None:
        # does not reset current_page
        self.search_term = term
        self._notify()

    def set_page(self, page: int) -> None:
        self.current_page = page
        self._notify()

    # ---- queries ----

    def filtered(self) -> list[Task]:
        needle = self.search_term.lower()
        if not needle:
            return list(self._tasks)
        return [t for t in self._tasks if needle in t.text.lower() or needle in t.name.lower()]

    def query(self, page_size: int | None = None) -> TaskPage:
        """
        Current page of the filtered view.

        Pages are 1-based; pages below 1 or past the end give an empty slice.
        """
        size = self._page_size if page_size is None else page_size
        if size < 1:
            raise ValueError("page_size must be >= 1")

        matches = self.filtered()
        page = self.current_page
        if page < 1:
            items: list[Task] = []
        else:
            start = (page - 1) * size
            items = matches[start : start + size]
        return TaskPage(tasks=items, total=len(matches), page=page, page_size=size)

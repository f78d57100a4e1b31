# src/taskpad/tasks/task_api.py

"""Small high-level helpers the view layer uses on top of TaskStore."""

from __future__ import annotations

import math

from ..core.state import AppState
from .task_models import Task


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return math.ceil(max(0, total) / page_size)


def status_label(task: Task) -> str:
    return "Completed" if task.completed else "Pending"


def toggle_label(task: Task) -> str:
    """Caption of the complete/undo action for this task."""
    return "Undo" if task.completed else "Complete"


def task_for_row(state: AppState, row: int) -> Task | None:
    """
    Resolve a 1-based row number on the currently displayed page to its task.

    Rows are what the user sees; ids never are.
    """
    if row < 1:
        return None
    tasks = state.store.query().tasks
    if row > len(tasks):
        return None
    return tasks[row - 1]

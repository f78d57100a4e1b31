# tests/test_task_api.py

from __future__ import annotations

import pytest

from taskpad.tasks.task_api import page_count, status_label, task_for_row, toggle_label
from taskpad.tasks.task_models import Task


@pytest.mark.parametrize(("total", "size", "expected"), [(0, 10, 0), (1, 10, 1), (10, 10, 1), (25, 10, 3)])
def test_page_count(total: int, size: int, expected: int) -> None:
    assert page_count(total, size) == expected


def test_page_count_rejects_zero_size() -> None:
    with pytest.raises(ValueError):
        page_count(3, 0)


def test_labels() -> None:
    done = Task(id=1, name="A", text="a", completed=True)
    todo = Task(id=2, name="B", text="b")
    assert (status_label(done), toggle_label(done)) == ("Completed", "Undo")
    assert (status_label(todo), toggle_label(todo)) == ("Pending", "Complete")


def test_task_for_row_uses_filtered_page(state) -> None:
    for i in range(12):
        state.store.add(f"user{i}", f"task {i}")

    state.store.set_page(2)
    assert task_for_row(state, 1).name == "user10"
    assert task_for_row(state, 2).name == "user11"
    assert task_for_row(state, 3) is None
    assert task_for_row(state, 0) is None

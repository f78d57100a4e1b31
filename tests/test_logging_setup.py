# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from taskpad.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize("name", ["taskpad", "taskpad.tasks.task_store"])
def test_own_logs_pass_at_any_level(name: str) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, logging.DEBUG))


@pytest.mark.parametrize("name", ["py.warnings", "sqlite3", "taskpadx"])
def test_other_logs_need_error(name: str) -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record(name, logging.WARNING))
    assert f.filter(_record(name, logging.ERROR))

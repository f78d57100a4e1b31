# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.core.state import AppState


def _run(state: AppState, line: str) -> str:
    reply = registry.handle(state, line)
    assert reply is not None
    return reply


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def h(state, arg):
        called.append(arg)
        return "h"

    reg.register("a", h, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "h"
    assert reg.handle(state, "/ALPHA") == "h"
    assert called == ["x y", ""]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    text = _run(state, "/help")
    for name in ("/add", "/done", "/del", "/edit", "/save", "/search", "/page"):
        assert name in text


def test_add_command(state) -> None:
    assert "Added" in _run(state, "/add Alice | Buy milk")
    t = state.store.tasks[0]
    assert (t.name, t.text) == ("Alice", "Buy milk")


def test_add_command_reports_validation_error(state) -> None:
    assert _run(state, "/add 123 | task") == "Please enter a valid name."
    assert _run(state, "/add Alice") == "Please enter both a name and a task."
    assert state.store.tasks == []


def test_rows_resolve_against_current_page(state) -> None:
    _run(state, "/add Alice | Buy milk")
    _run(state, "/add Bob | Walk dog")
    _run(state, "/search dog")

    # row 1 of the filtered page is Bob
    assert "Complete" in _run(state, "/done 1")
    assert [t.completed for t in state.store.tasks] == [False, True]

    assert "Undo" in _run(state, "/done 1")
    assert state.store.get(2).completed is False


def test_bad_row_does_not_touch_store(state) -> None:
    _run(state, "/add Alice | Buy milk")
    writes = len(state.storage.writes)

    assert "Usage" in _run(state, "/done 5")
    assert "Usage" in _run(state, "/del x")
    assert "Usage" in _run(state, "/edit")
    assert len(state.storage.writes) == writes


def test_delete_command(state) -> None:
    _run(state, "/add Alice | Buy milk")
    _run(state, "/add Bob | Walk dog")
    assert "Walk dog" in _run(state, "/del 2")
    assert [t.name for t in state.store.tasks] == ["Alice"]


def test_edit_flow(state) -> None:
    _run(state, "/add Alice | Buy milk")

    assert "Nothing is being edited" in _run(state, "/name X")
    assert "Editing row 1" in _run(state, "/edit 1")
    _run(state, "/name Carol")
    _run(state, "/text Buy oat milk")
    assert _run(state, "/save") == "Task updated."

    t = state.store.tasks[0]
    assert (t.name, t.text) == ("Carol", "Buy oat milk")
    assert _run(state, "/save") == "Nothing is being edited."


def test_cancel_flow(state) -> None:
    _run(state, "/add Alice | Buy milk")
    _run(state, "/edit 1")
    _run(state, "/text changed")
    assert _run(state, "/cancel") == "Edit cancelled."
    assert state.store.tasks[0].text == "Buy milk"
    assert _run(state, "/cancel") == "Nothing is being edited."


def test_page_command_bounds(state) -> None:
    assert _run(state, "/page 1") == "No pages to show."

    for i in range(12):
        _run(state, f"/add user{i} | task {i}")

    assert _run(state, "/page 2") == "Page 2 of 2."
    assert state.store.current_page == 2
    assert "between 1 and 2" in _run(state, "/page 3")
    assert state.store.current_page == 2


def test_search_command_does_not_reset_page(state) -> None:
    for i in range(12):
        _run(state, f"/add user{i} | task {i}")
    _run(state, "/page 2")

    assert "1 task(s) match" in _run(state, "/search user3")
    assert state.store.current_page == 2
    assert state.store.query().tasks == []

    assert "Search cleared" in _run(state, "/search")


def test_status_command(state) -> None:
    _run(state, "/add Alice | Buy milk")
    _run(state, "/done 1")
    text = _run(state, "/status")
    assert "Tasks: 1 (1 completed)" in text
    assert "json" in text


def test_list_command_renders_board(state) -> None:
    _run(state, "/add Alice | Buy milk")
    board = _run(state, "/list")
    assert "Alice" in board
    assert "Pending" in board

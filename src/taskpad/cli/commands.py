# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import page_count, task_for_row, toggle_label

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console view (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Everything after the command name is passed through as one string,
        so names and task texts may contain spaces.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_int(arg: str) -> int | None:
    try:
        return int(arg.split()[0]) if arg else None
    except ValueError:
        return None


def _row_usage(cmd: str) -> str:
    return f"Usage: /{cmd} <row>. Rows are the No. column of the current page."


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, arg: str) -> str:
    store = state.store
    tasks = store.tasks
    done = sum(1 for t in tasks if t.completed)
    backend = getattr(state.settings, "storage_backend", "?")
    path = getattr(state.settings, "storage_path", "?")
    search = store.search_term or "(none)"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} completed)\n"
        f"  Search: {search}\n"
        f"  Page: {store.current_page} (page size {store.page_size})\n"
        f"  Storage: {backend} at {path}"
    )


def cmd_add(state: AppState, arg: str) -> str:
    """
    /add <name> | <task>
    """
    name, sep, text = arg.partition("|")
    if not sep:
        text = ""
    task = state.store.add(name.strip(), text.strip())
    if task is None:
        return state.store.error_message
    return f"Added task for {task.name}."


def cmd_done(state: AppState, arg: str) -> str:
    """
    /done <row>  -> complete a pending task, or undo a completed one
    """
    row = _parse_int(arg)
    task = task_for_row(state, row) if row is not None else None
    if task is None:
        return _row_usage("done")
    action = toggle_label(task)
    state.store.toggle_complete(task.id)
    return f"{action}: {task.text}"


def cmd_delete(state: AppState, arg: str) -> str:
    row = _parse_int(arg)
    task = task_for_row(state, row) if row is not None else None
    if task is None:
        return _row_usage("del")
    state.store.delete(task.id)
    return f"Deleted: {task.text}"


def cmd_edit(state: AppState, arg: str) -> str:
    """
    /edit <row>   -> start editing; then /name, /text, /save or /cancel
    """
    row = _parse_int(arg)
    task = task_for_row(state, row) if row is not None else None
    if task is None:
        return _row_usage("edit")
    state.store.begin_edit(task.id)
    return f"Editing row {row}. Use /name, /text, then /save or /cancel."


def cmd_name(state: AppState, arg: str) -> str:
    if not state.store.update_draft(name=arg):
        return "Nothing is being edited. Use /edit <row> first."
    return f"Draft name: {arg}"


def cmd_text(state: AppState, arg: str) -> str:
    if not state.store.update_draft(text=arg):
        return "Nothing is being edited. Use /edit <row> first."
    return f"Draft task: {arg}"


def cmd_save(state: AppState, arg: str) -> str:
    if not state.store.commit_edit():
        return "Nothing is being edited."
    return "Task updated."


def cmd_cancel(state: AppState, arg: str) -> str:
    if state.store.editing_id is None:
        return "Nothing is being edited."
    state.store.cancel_edit()
    return "Edit cancelled."


def cmd_search(state: AppState, arg: str) -> str:
    """
    /search <term>  -> filter by name or task text (case-insensitive)
    /search         -> clear the filter
    """
    state.store.set_search_term(arg)
    total = state.store.query().total
    if not arg:
        return f"Search cleared ({total} tasks)."
    return f"{total} task(s) match '{arg}'."


def cmd_page(state: AppState, arg: str) -> str:
    n = _parse_int(arg)
    pages = page_count(state.store.query().total, state.page_size)
    if pages == 0:
        return "No pages to show."
    if n is None or not 1 <= n <= pages:
        return f"Usage: /page <n> with n between 1 and {pages}."
    state.store.set_page(n)
    return f"Page {n} of {pages}."


def cmd_list(state: AppState, arg: str) -> str:
    from ..connectors.console_connector import render_board  # local import to avoid cycle

    return render_board(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task totals, filter, page and storage.")
registry.register("add", cmd_add, help_text="Add a task: /add <name> | <task>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Complete / undo a task: /done <row>.", aliases=["complete", "undo"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <row>.", aliases=["delete", "rm"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <row>.")
registry.register("name", cmd_name, help_text="Set the draft name while editing.")
registry.register("text", cmd_text, help_text="Set the draft task text while editing.")
registry.register("save", cmd_save, help_text="Save the edited task.", aliases=["update"])
registry.register("cancel", cmd_cancel, help_text="Discard the current edit.")
registry.register("search", cmd_search, help_text="Filter tasks: /search <term> (empty clears).", aliases=["s"])
registry.register("page", cmd_page, help_text="Go to a page: /page <n>.", aliases=["p"])
registry.register("list", cmd_list, help_text="Show the current page.", aliases=["ls"])

# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import page_count, status_label
from ..tasks.task_models import StoreSnapshot

logger = logging.getLogger(__name__)

HEADERS = ("No.", "Name", "Task", "Status")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _format_table(rows: list[tuple[str, ...]]) -> list[str]:
    widths = [len(h) for h in HEADERS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: tuple[str, ...]) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    out = [line(HEADERS), "-+-".join("-" * w for w in widths)]
    out.extend(line(r) for r in rows)
    return out


def format_pages(current: int, pages: int) -> str:
    """Page indicators, active one bracketed: `1 [2] 3`."""
    return " ".join(f"[{n}]" if n == current else str(n) for n in range(1, pages + 1))


def render_board(state: AppState) -> str:
    """Draw the current page: error alert, filter, task table, page indicators."""
    store = state.store
    page = store.query()

    lines: list[str] = []
    if store.error_message:
        lines.append(f"[!] {store.error_message}")
    if store.search_term:
        lines.append(f"Search: {store.search_term}")

    rows: list[tuple[str, ...]] = []
    for index, task in enumerate(page.tasks, start=1):
        if task.id == store.editing_id:
            rows.append((str(index), store.draft_name, store.draft_text, "(editing)"))
        else:
            rows.append((str(index), task.name, task.text, status_label(task)))

    lines.extend(_format_table(rows))
    if not rows:
        lines.append("(no tasks on this page)")

    pages = page_count(page.total, page.page_size)
    if pages:
        lines.append(f"Pages: {format_pages(store.current_page, pages)}")
    return "\n".join(lines)


def run_console_loop(state: AppState) -> None:
    logger.info("Console view started (tasks=%s).", len(state.store.tasks))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    _print_ts(f"[{app_name}] Use /help for commands, /add <name> | <task> to add. Use /exit to quit.\n")

    dirty = False

    def on_change(_snapshot: StoreSnapshot) -> None:
        nonlocal dirty
        dirty = True

    unsubscribe = state.store.subscribe(on_change)
    print(render_board(state))

    try:
        while True:
            try:
                user_input = input(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                _print_ts("Commands start with '/'. Use /help to list them.")
                continue

            dirty = False
            try:
                reply = command_registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                _print_ts(reply)
            if dirty:
                print(render_board(state))
    finally:
        unsubscribe()

    logger.info("Console view finished.")

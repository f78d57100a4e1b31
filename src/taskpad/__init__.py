"""Single-user task list: in-memory store, key-value persistence, console view."""

__version__ = "0.1.0"

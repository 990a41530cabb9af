"""Storage location resolver and exports for the todo CLI.

This module resolves where the SQLite database lives and re-exports the
store, its row types and its error kinds.

Environment Variables:
    TODO_DB_PATH: Full path to the database file. Used verbatim when set.
                  Default: ~/.config/todo/todo.db

Example:
    from storage import SQLiteTodoStore, get_db_path

    with SQLiteTodoStore(get_db_path()) as store:
        store.create_todo("Groceries")
        rows = store.list_todos()
"""

from __future__ import annotations

import os
from pathlib import Path

from storage.protocol import (
    DuplicateListError,
    EntryRow,
    ListNotFoundError,
    TodoListEntries,
    TodoRow,
    TodoStore,
    TodoStoreError,
)
from storage.sqlite_backend import SQLiteTodoStore

__all__ = [
    "DB_PATH_ENV",
    "DuplicateListError",
    "EntryRow",
    "ListNotFoundError",
    "SQLiteTodoStore",
    "TodoListEntries",
    "TodoRow",
    "TodoStore",
    "TodoStoreError",
    "get_db_path",
]

DB_PATH_ENV: str = "TODO_DB_PATH"


def get_db_path() -> Path:
    """Get the SQLite database path from environment or default.

    When TODO_DB_PATH is set and non-empty it is returned as-is, without
    checking or creating its directory. Otherwise ~/.config/todo is created
    (including missing parents) and ~/.config/todo/todo.db is returned.

    Returns:
        Path to the SQLite database file.

    Raises:
        RuntimeError: If the home directory can't be resolved.
        OSError: If the config directory can't be created.
    """
    custom_path = os.environ.get(DB_PATH_ENV, "")

    if custom_path:
        return Path(custom_path)

    config_dir = Path.home() / ".config" / "todo"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "todo.db"

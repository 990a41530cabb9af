"""SQLite database storage backend for the todo CLI.

This module provides the data access layer: the schema, an idempotent schema
initializer, and a store that owns a single connection for the lifetime of
one command invocation.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from storage.protocol import (
    DuplicateListError,
    EntryRow,
    ListNotFoundError,
    TodoListEntries,
    TodoRow,
)

logger = logging.getLogger(__name__)

# SQL schema for the SQLite database
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    title TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    title TEXT NOT NULL,
    completed BOOLEAN NOT NULL DEFAULT FALSE,
    todo_id INTEGER NOT NULL,
    FOREIGN KEY (todo_id) REFERENCES todos(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_entries_todo_id ON entries(todo_id);
"""


def connect(db_path: Path | str) -> sqlite3.Connection:
    """Create and configure a database connection.

    Enables WAL mode, sets IMMEDIATE isolation level for transaction control,
    and enables foreign key constraints so cascades are honoured.

    Args:
        db_path: Path to the SQLite database file, or ":memory:".

    Returns:
        A configured sqlite3.Connection object.

    Raises:
        sqlite3.Error: If there's an error connecting to the database.
    """
    conn = sqlite3.connect(str(db_path), isolation_level="IMMEDIATE")
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.row_factory = sqlite3.Row
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create database tables and indexes if they don't exist.

    Safe to run on every open; existing tables and rows are left untouched.

    Raises:
        sqlite3.Error: If there's an error executing schema creation.
    """
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def _parse_timestamp(value: str | datetime) -> datetime:
    """Parse a CURRENT_TIMESTAMP value ("YYYY-MM-DD HH:MM:SS") as UTC."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SQLiteTodoStore:
    """SQLite database store for todo lists and their entries.

    Holds one connection between open() and close(). Use it as a context
    manager so the connection is released on every exit path.

    Attributes:
        db_path: The path to the SQLite database file.

    Example:
        with SQLiteTodoStore(get_db_path()) as store:
            store.create_todo("Groceries")
            store.insert_entry("Groceries", "Milk")
            todo_list = store.list_entries("Groceries")
    """

    def __init__(self, db_path: Path | str) -> None:
        """Initialize the store without touching the filesystem.

        Args:
            db_path: The path to the SQLite database file.
        """
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def open(self) -> SQLiteTodoStore:
        """Open the connection and ensure the schema exists.

        Raises:
            sqlite3.Error: If the database can't be opened or the schema
                can't be created.
        """
        if self._conn is not None:
            return self

        logger.debug("Opening todo database at %s", self.db_path)
        conn = connect(self.db_path)
        try:
            ensure_schema(conn)
        except sqlite3.Error:
            conn.close()
            raise
        self._conn = conn
        return self

    def close(self) -> None:
        """Close the connection. Calling close() twice is a no-op."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> SQLiteTodoStore:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection.

        Raises:
            RuntimeError: If the store has not been opened.
        """
        if self._conn is None:
            raise RuntimeError("SQLiteTodoStore is not open")
        return self._conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed statements in a single write transaction.

        Commits on success, rolls back and re-raises on any error.
        """
        conn = self.connection
        conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
        except Exception:
            try:
                conn.rollback()
            except sqlite3.Error:
                pass  # Connection may be in bad state after a failed statement
            raise
        else:
            conn.commit()

    def _find_list_id(self, conn: sqlite3.Connection, title: str) -> int | None:
        """Resolve a list title to its id (oldest list wins on duplicates)."""
        row = conn.execute(
            "SELECT id FROM todos WHERE title = ? ORDER BY id LIMIT 1",
            (title,),
        ).fetchone()
        return None if row is None else row["id"]

    def create_todo(self, title: str) -> int:
        """Create a todo list with the given title.

        Args:
            title: Title of the new list.

        Returns:
            The id of the created list.

        Raises:
            DuplicateListError: If a list with that title already exists.
            sqlite3.Error: If there's an error during the transaction.
        """
        with self._transaction() as conn:
            if self._find_list_id(conn, title) is not None:
                raise DuplicateListError(title)
            cursor = conn.execute("INSERT INTO todos (title) VALUES (?)", (title,))
            todo_id = cursor.lastrowid

        logger.debug("Created todo list %r with id %s", title, todo_id)
        return todo_id

    def list_todos(self) -> list[TodoRow]:
        """List all todo lists within the database.

        Returns:
            A list of TodoRow objects in creation order.
            Empty list if no lists exist.

        Raises:
            sqlite3.Error: If there's an error querying the database.
        """
        cursor = self.connection.execute(
            "SELECT id, title, created_at FROM todos ORDER BY id"
        )
        return [
            {
                "id": row["id"],
                "title": row["title"],
                "created_at": _parse_timestamp(row["created_at"]),
            }
            for row in cursor
        ]

    def list_entries(self, list_title: str) -> TodoListEntries:
        """Retrieve the entries of a todo list.

        The title is resolved to the list's id first, so a missing list is
        reported instead of looking like a list with no entries.

        Args:
            list_title: Title of the list to read.

        Returns:
            The list's title and its entries in insertion order.

        Raises:
            ListNotFoundError: If no list has that title.
            sqlite3.Error: If there's an error querying the database.
        """
        conn = self.connection
        todo_id = self._find_list_id(conn, list_title)
        if todo_id is None:
            raise ListNotFoundError(list_title)

        cursor = conn.execute(
            "SELECT title, completed FROM entries WHERE todo_id = ? ORDER BY id",
            (todo_id,),
        )
        entries: list[EntryRow] = [
            {"title": row["title"], "completed": bool(row["completed"])}
            for row in cursor
        ]
        return {"title": list_title, "entries": entries}

    def insert_entry(self, list_title: str, entry_title: str) -> int:
        """Insert a new, uncompleted entry into an existing todo list.

        Args:
            list_title: Title of the list that owns the entry.
            entry_title: Title of the new entry.

        Returns:
            The id of the created entry.

        Raises:
            ListNotFoundError: If no list has that title. Nothing is inserted.
            sqlite3.Error: If there's an error during the transaction.
        """
        with self._transaction() as conn:
            todo_id = self._find_list_id(conn, list_title)
            if todo_id is None:
                raise ListNotFoundError(list_title)
            cursor = conn.execute(
                "INSERT INTO entries (title, todo_id) VALUES (?, ?)",
                (entry_title, todo_id),
            )
            entry_id = cursor.lastrowid

        logger.debug(
            "Inserted entry %r into list %r with id %s", entry_title, list_title, entry_id
        )
        return entry_id

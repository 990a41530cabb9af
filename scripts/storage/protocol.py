"""Protocols, row types and error kinds for the todo store.

This module defines the interface and data structures shared by the storage
layer and the command surface. Rows are plain TypedDicts so they can be
rendered and compared without touching the database.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, TypedDict


class TodoRow(TypedDict):
    """Structure for a single todo list row.

    Attributes:
        id: Auto-incremented identity of the list.
        title: The list's display title.
        created_at: UTC timestamp set by the database on insert.
    """

    id: int
    title: str
    created_at: datetime


class EntryRow(TypedDict):
    """Structure for a single entry within a todo list.

    Attributes:
        title: The entry description.
        completed: Whether the entry has been checked off.
    """

    title: str
    completed: bool


class TodoListEntries(TypedDict):
    """A todo list together with its entries, in insertion order."""

    title: str
    entries: list[EntryRow]


class TodoStoreError(Exception):
    """Base class for errors raised by the data access layer."""


class ListNotFoundError(TodoStoreError, LookupError):
    """Raised when no todo list matches the requested title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"no todo list named {title!r}")
        self.title = title


class DuplicateListError(TodoStoreError, ValueError):
    """Raised when creating a list whose title is already taken."""

    def __init__(self, title: str) -> None:
        super().__init__(f"a todo list named {title!r} already exists")
        self.title = title


class TodoStore(Protocol):
    """Protocol for todo stores.

    The command surface only depends on these four operations, so tests and
    alternative stores can stand in for the SQLite implementation.
    """

    def create_todo(self, title: str) -> int:
        """Create a new todo list.

        Args:
            title: Title of the new list.

        Returns:
            The id of the created list.

        Raises:
            DuplicateListError: If a list with that title already exists.
        """
        ...

    def list_todos(self) -> list[TodoRow]:
        """Return every todo list in creation order.

        Returns an empty list if no lists exist.
        """
        ...

    def list_entries(self, list_title: str) -> TodoListEntries:
        """Return the entries of the list named ``list_title``.

        Raises:
            ListNotFoundError: If no list has that title.
        """
        ...

    def insert_entry(self, list_title: str, entry_title: str) -> int:
        """Add an entry to the list named ``list_title``.

        Returns:
            The id of the created entry.

        Raises:
            ListNotFoundError: If no list has that title.
        """
        ...

"""Shared fixtures and utilities for todo store tests.

This module provides common test fixtures used across the storage tests,
including temporary directories, open stores and pre-populated lists.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from storage.sqlite_backend import SQLiteTodoStore


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary directory to hold the database.

    Returns:
        Path to a clean temporary directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def db_path(tmp_project: Path) -> Path:
    """Path of a not-yet-created database file."""
    return tmp_project / "todo.db"


@pytest.fixture
def store(db_path: Path) -> Iterator[SQLiteTodoStore]:
    """Create an open SQLite store, closed again after the test.

    Args:
        db_path: Path of the database file.

    Yields:
        An open SQLiteTodoStore.
    """
    with SQLiteTodoStore(db_path) as opened:
        yield opened


@pytest.fixture
def groceries(store: SQLiteTodoStore) -> SQLiteTodoStore:
    """Create a "Groceries" list with "Milk" and "Eggs" entries.

    Returns:
        The same store, now populated.
    """
    store.create_todo("Groceries")
    store.insert_entry("Groceries", "Milk")
    store.insert_entry("Groceries", "Eggs")
    return store


@pytest.fixture
def sample_titles() -> list[str]:
    """A list of todo list titles for bulk creation."""
    return ["Groceries", "Chores", "Reading"]

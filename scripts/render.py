"""Tree-style text rendering for todo lists and their entries.

Every function here is pure apart from print_block(), which is the single
place output reaches the terminal.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from storage.protocol import EntryRow, TodoListEntries, TodoRow

SINGLE_BULLET: str = "─"
STARTING_BULLET: str = "┌╴"
CONNECTOR_BULLET: str = "├╴"
ENDING_BULLET: str = "└╴"

CHECKED_BOX: str = "[x]"
UNCHECKED_BOX: str = "[ ]"


def bullet_for(index: int, count: int) -> str:
    """Return the bullet for item ``index`` of a ``count``-item block."""
    if count == 1:
        return SINGLE_BULLET
    if index == 0:
        return STARTING_BULLET
    if index == count - 1:
        return ENDING_BULLET
    return CONNECTOR_BULLET


def _render_lines(labels: Sequence[str]) -> str:
    count = len(labels)
    return "".join(
        f"{bullet_for(i, count)} {label}\n" for i, label in enumerate(labels)
    )


def checkbox(entry: EntryRow) -> str:
    """Return the checkbox marker for an entry."""
    return CHECKED_BOX if entry["completed"] else UNCHECKED_BOX


def render_table(rows: Sequence[TodoRow]) -> str:
    """Render a flat table of todo list titles.

    A single list renders as "─ <title>"; several lists render as a tree
    opened by "┌╴", joined by "├╴" and closed by "└╴". No lists renders as
    an empty string.
    """
    return _render_lines([row["title"] for row in rows])


def render_list(todo_list: TodoListEntries) -> str:
    """Render a list's title as a header followed by its entries.

    Entries use the same bullets as render_table(), each followed by a
    checkbox: "[x]" when completed, "[ ]" otherwise.
    """
    entries = todo_list["entries"]
    body = _render_lines([f"{checkbox(entry)} {entry['title']}" for entry in entries])
    return f"{todo_list['title']}\n{body}"


def print_block(text: str, file: TextIO | None = None) -> None:
    """Write a rendered block followed by a blank line."""
    print(text, file=file if file is not None else sys.stdout)

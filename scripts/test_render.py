"""
Test suite for render.py tree-style output.

Tests cover:
- Bullet selection for single, first, interior and last items
- Flat table rendering of todo lists
- List-with-entries rendering with checkboxes
- Printing a block followed by a blank line
"""
from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest

from render import (
    CONNECTOR_BULLET,
    ENDING_BULLET,
    SINGLE_BULLET,
    STARTING_BULLET,
    bullet_for,
    print_block,
    render_list,
    render_table,
)
from storage.protocol import TodoListEntries, TodoRow

CREATED = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_rows(*titles: str) -> list[TodoRow]:
    return [
        {"id": i, "title": title, "created_at": CREATED}
        for i, title in enumerate(titles, start=1)
    ]


# =============================================================================
# TestBulletFor
# =============================================================================


class TestBulletFor:
    """Tests for bullet_for() function."""

    def test_single_item_uses_single_bullet(self) -> None:
        assert bullet_for(0, 1) == "─"

    def test_two_items_use_start_and_end(self) -> None:
        assert [bullet_for(i, 2) for i in range(2)] == ["┌╴", "└╴"]

    @pytest.mark.parametrize("count", [3, 5])
    def test_interior_items_use_connector(self, count: int) -> None:
        """Every item between the first and last gets the connector."""
        bullets = [bullet_for(i, count) for i in range(count)]
        assert bullets[0] == STARTING_BULLET
        assert bullets[-1] == ENDING_BULLET
        assert bullets[1:-1] == [CONNECTOR_BULLET] * (count - 2)


# =============================================================================
# TestRenderTable
# =============================================================================


class TestRenderTable:
    """Tests for render_table() function."""

    def test_single_list_renders_one_line(self) -> None:
        result = render_table(make_rows("Groceries"))
        assert result == f"{SINGLE_BULLET} Groceries\n"
        assert result.splitlines() == ["─ Groceries"]

    def test_three_lists_render_as_tree(self) -> None:
        result = render_table(make_rows("Groceries", "Chores", "Reading"))
        assert result.splitlines() == [
            "┌╴ Groceries",
            "├╴ Chores",
            "└╴ Reading",
        ]

    def test_empty_table_renders_nothing(self) -> None:
        assert render_table([]) == ""

    def test_every_line_is_newline_terminated(self) -> None:
        result = render_table(make_rows("a", "b", "c", "d"))
        assert result.endswith("\n")
        assert result.count("\n") == 4


# =============================================================================
# TestRenderList
# =============================================================================


class TestRenderList:
    """Tests for render_list() function."""

    def test_title_is_header_line(self) -> None:
        todo_list: TodoListEntries = {"title": "Groceries", "entries": []}
        assert render_list(todo_list) == "Groceries\n"

    def test_single_entry_uses_single_bullet(self) -> None:
        todo_list: TodoListEntries = {
            "title": "Groceries",
            "entries": [{"title": "Milk", "completed": False}],
        }
        assert render_list(todo_list) == "Groceries\n─ [ ] Milk\n"

    def test_completed_entry_is_checked(self) -> None:
        """Checkboxes follow completion; bullets follow position only."""
        todo_list: TodoListEntries = {
            "title": "Groceries",
            "entries": [
                {"title": "Milk", "completed": False},
                {"title": "Eggs", "completed": True},
                {"title": "Bread", "completed": False},
            ],
        }
        assert render_list(todo_list).splitlines() == [
            "Groceries",
            "┌╴ [ ] Milk",
            "├╴ [x] Eggs",
            "└╴ [ ] Bread",
        ]

    def test_completed_first_entry_keeps_starting_bullet(self) -> None:
        todo_list: TodoListEntries = {
            "title": "Chores",
            "entries": [
                {"title": "Vacuum", "completed": True},
                {"title": "Dishes", "completed": True},
            ],
        }
        assert render_list(todo_list).splitlines()[1:] == [
            "┌╴ [x] Vacuum",
            "└╴ [x] Dishes",
        ]


# =============================================================================
# TestPrintBlock
# =============================================================================


class TestPrintBlock:
    """Tests for print_block() function."""

    def test_adds_trailing_blank_line(self) -> None:
        out = StringIO()
        print_block(render_table(make_rows("Groceries")), file=out)
        assert out.getvalue() == "─ Groceries\n\n"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_block("Groceries\n")
        assert capsys.readouterr().out == "Groceries\n\n"

    def test_empty_block_prints_blank_line(self) -> None:
        out = StringIO()
        print_block(render_table([]), file=out)
        assert out.getvalue() == "\n"


# =============================================================================
# Main Entry Point
# =============================================================================


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

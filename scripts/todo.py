#!/usr/bin/env python3
"""
todo - Create and manage todo lists from the command line.

Commands:
    todo list                   Print every todo list.
    todo list <name>            Print the entries of list <name> with checkboxes.
    todo create <title>         Create a new top level todo list.
    todo create <title> <entry> Add an entry to the existing list <title>.

    "l" and "c" are aliases for "list" and "create".

Environment Variables:
    TODO_DB_PATH (optional): Full path to the SQLite database file.
                             Default: ~/.config/todo/todo.db
    DEBUG (optional): If set, enables debug logging to stderr.

Exit Codes:
    0: Success
    1: Error (unknown list, duplicate list, database or file system failure)
    2: Usage error (wrong number of arguments, empty title); the database
       is not opened
"""
from __future__ import annotations

import argparse
import logging
import os
import sqlite3
import sys
import traceback

from render import print_block, render_list, render_table
from storage import SQLiteTodoStore, TodoStore, TodoStoreError, get_db_path

# Version check
if sys.version_info < (3, 10):
    print("Error: Python 3.10+ required", file=sys.stderr)
    sys.exit(1)

__version__ = "0.1.0"

EXIT_OK: int = 0
EXIT_ERROR: int = 1

logger = logging.getLogger("todo")


def configure_logging() -> None:
    """Send log records to stderr; debug level only when DEBUG is set."""
    level = logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_list(store: TodoStore, args: argparse.Namespace) -> None:
    """Print all lists, or the entries of one list when a name is given."""
    if args.name is None:
        print_block(render_table(store.list_todos()))
    else:
        print_block(render_list(store.list_entries(args.name)))


def cmd_create(store: TodoStore, args: argparse.Namespace) -> None:
    """Create a list, or add an entry to an existing list."""
    if args.entry is None:
        store.create_todo(args.title)
    else:
        store.insert_entry(args.title, args.entry)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the todo command."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Create and manage todo lists!",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    # list
    p = subparsers.add_parser(
        "list", aliases=["l"], help="List all of the todo lists you have"
    )
    p.add_argument("name", nargs="?", metavar="<optional name of list>")
    p.set_defaults(handler=cmd_list)

    # create
    p = subparsers.add_parser(
        "create", aliases=["c"], help="Create a new top level todo list"
    )
    p.add_argument("title", metavar="<title>")
    p.add_argument("entry", nargs="?", metavar="<entry>")
    p.set_defaults(handler=cmd_create)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command line arguments.

    Exits with status 2 on any usage error, before the database is touched.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.handler is cmd_create:
        if not args.title:
            parser.error("Usage: todo create <title> [entry]")
        if args.entry is not None and not args.entry:
            parser.error("Usage: todo create <title> [entry]")
    elif args.name is not None and not args.name:
        parser.error("Usage: todo list [name]")

    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the todo command."""
    args = parse_args(argv)
    configure_logging()

    try:
        db_path = get_db_path()
        logger.debug("Running %r against %s", args.command, db_path)
        with SQLiteTodoStore(db_path) as store:
            args.handler(store, args)

        sys.exit(EXIT_OK)

    except TodoStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except (sqlite3.Error, OSError, RuntimeError) as e:
        print(f"Error running todo {args.command}: {e!r}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except Exception as e:
        # Unexpected errors - preserve stack trace for debugging
        print(f"Unexpected error running todo {args.command}: {e!r}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()

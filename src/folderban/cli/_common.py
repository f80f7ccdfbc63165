"""Shared helpers for CLI command handlers."""

import asyncio
import json
import sys
from pathlib import Path

from folderban.model.column import find_column
from folderban.model.item import find_items
from folderban.model.loader import load_board
from folderban.model.writer import save_board
from folderban.models import Board, Column, Item


def load_board_or_die(path: str, json_mode: bool) -> Board:
    """Load board from a descriptor path. Exit 1 with message if it fails."""
    try:
        return asyncio.run(load_board(Path(path).resolve()))
    except Exception as e:
        error(str(e), json_mode)


def find_column_or_die(board: Board, title: str, json_mode: bool) -> Column:
    """Lookup column by title. Exit 1 listing available columns if not found."""
    col = find_column(board, title)
    if col is not None:
        return col
    available = [f"  {c.title}" for c in board.columns]
    msg = f"Column '{title}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_item_or_die(board: Board, title: str, json_mode: bool, column: Column | None = None) -> Item:
    """Lookup a single item by title. Exit 1 if missing or ambiguous."""
    matches = find_items(board, title, column)
    if len(matches) == 1:
        return matches[0]
    if not matches:
        error(f"Item '{title}' not found.", json_mode)
    error(f"Item '{title}' is ambiguous ({len(matches)} matches); use --column.", json_mode)


def save(board: Board, json_mode: bool) -> None:
    """Save board. Exit 1 with message on fatal errors."""
    try:
        asyncio.run(save_board(board))
    except Exception as e:
        error(str(e), json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def build_column_summaries(board: Board) -> list[dict]:
    """Build column summary dicts from board."""
    return [
        {
            "name": col.title,
            "items": len(col.items),
            "done": sum(1 for item in col.items if item.checked),
        }
        for col in board.columns
    ]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    items = "item" if c["items"] == 1 else "items"
    return f"{indent}{c['name']:<16} {c['items']} {items} ({c['done']} done)"


def item_summary(item: Item, column: Column) -> dict:
    """Build an item summary dict."""
    return {
        "title": item.title,
        "checked": item.checked,
        "column": column.title,
        "file": item.file.name if item.file else None,
    }


def format_item_line(item: Item, indent: str = "  ") -> str:
    """Format an item as a checklist line."""
    return f"{indent}[{item.check_char}] {item.title}"

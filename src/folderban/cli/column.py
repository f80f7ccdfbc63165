"""Handlers for 'folderban column' commands."""

from folderban.cli._common import (
    build_column_summaries,
    error,
    find_column_or_die,
    format_column_line,
    load_board_or_die,
    output_json,
    output_result,
    save,
)
from folderban.model.column import create_column, remove_column, rename_column


def column_list(args) -> int:
    """List all columns."""
    board = load_board_or_die(args.board, args.json)
    items = build_column_summaries(board)

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))

    return 0


def column_add(args) -> int:
    """Create a new column."""
    board = load_board_or_die(args.board, args.json)

    try:
        col = create_column(board, args.name)
    except ValueError as e:
        error(str(e), args.json)

    save(board, args.json)

    output_result({"name": col.title}, f'Created column "{col.title}"', args.json)
    return 0


def column_rename(args) -> int:
    """Rename a column, moving its item files."""
    board = load_board_or_die(args.board, args.json)
    col = find_column_or_die(board, args.name, args.json)

    try:
        rename_column(board, col, args.new_name)
    except ValueError as e:
        error(str(e), args.json)

    save(board, args.json)

    output_result(
        {"old_name": args.name, "new_name": col.title, "items": len(col.items)},
        f'Renamed column "{args.name}" to "{col.title}"',
        args.json,
    )
    return 0


def column_remove(args) -> int:
    """Remove a column and delete its item files."""
    board = load_board_or_die(args.board, args.json)
    col = find_column_or_die(board, args.name, args.json)

    if col.items and not args.force:
        error(f'Column "{col.title}" has {len(col.items)} items; use --force to delete them.', args.json)

    remove_column(board, col)
    save(board, args.json)

    output_result({"name": col.title, "items": len(col.items)}, f'Removed column "{col.title}"', args.json)
    return 0

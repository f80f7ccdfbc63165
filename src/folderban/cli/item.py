"""Handlers for 'folderban item' commands."""

from folderban.cli._common import (
    error,
    find_column_or_die,
    find_item_or_die,
    format_item_line,
    item_summary,
    load_board_or_die,
    output_json,
    output_result,
    save,
)
from folderban.model.item import create_item, find_item_column, move_item, remove_item, set_checked


def item_list(args) -> int:
    """List items grouped by column."""
    board = load_board_or_die(args.board, args.json)

    columns = board.columns
    if args.column:
        columns = [find_column_or_die(board, args.column, args.json)]

    if args.json:
        output_json([item_summary(item, col) for col in columns for item in col.items])
    else:
        for col in columns:
            print(col.title)
            for item in col.items:
                print(format_item_line(item))

    return 0


def item_add(args) -> int:
    """Create an item in a column."""
    board = load_board_or_die(args.board, args.json)
    col = find_column_or_die(board, args.column, args.json) if args.column else None

    try:
        item = create_item(board, args.title, column=col, checked=args.done)
    except ValueError as e:
        error(str(e), args.json)

    save(board, args.json)

    col = find_item_column(board, item)
    output_result(
        item_summary(item, col),
        f'Created "{item.title}" in "{col.title}" ({item.file.name if item.file else "not saved"})',
        args.json,
    )
    return 0


def item_move(args) -> int:
    """Move an item to another column."""
    board = load_board_or_die(args.board, args.json)
    source = find_column_or_die(board, args.source, args.json) if args.source else None
    item = find_item_or_die(board, args.title, args.json, column=source)
    target = find_column_or_die(board, args.column, args.json)

    move_item(board, item, target)
    save(board, args.json)

    output_result(item_summary(item, target), f'Moved "{item.title}" to "{target.title}"', args.json)
    return 0


def item_check(args) -> int:
    """Mark an item done, or not done with --undo."""
    board = load_board_or_die(args.board, args.json)
    source = find_column_or_die(board, args.source, args.json) if args.source else None
    item = find_item_or_die(board, args.title, args.json, column=source)

    set_checked(item, not args.undo)
    save(board, args.json)

    col = find_item_column(board, item)
    state = "not done" if args.undo else "done"
    output_result(item_summary(item, col), f'Marked "{item.title}" {state}', args.json)
    return 0


def item_remove(args) -> int:
    """Remove an item and delete its file."""
    board = load_board_or_die(args.board, args.json)
    source = find_column_or_die(board, args.source, args.json) if args.source else None
    item = find_item_or_die(board, args.title, args.json, column=source)
    col = find_item_column(board, item)

    remove_item(board, item)
    save(board, args.json)

    output_result(item_summary(item, col), f'Removed "{item.title}" from "{col.title}"', args.json)
    return 0

"""Handlers for 'folderban board' commands."""

from folderban.cli._common import build_column_summaries, format_column_line, load_board_or_die, output_json


def board_summary(args) -> int:
    """Show board summary: title, columns, item counts."""
    board = load_board_or_die(args.board, args.json)
    columns = build_column_summaries(board)

    if args.json:
        output_json(
            {
                "title": board.title,
                "items": board.item_count,
                "done": board.checked_count,
                "columns": columns,
                "errors": board.errors,
            }
        )
    else:
        print(board.title)
        for c in columns:
            print(format_column_line(c, indent="  "))
        if board.errors:
            skipped = "file" if len(board.errors) == 1 else "files"
            print(f"  ({len(board.errors)} unreadable {skipped} skipped)")

    return 0

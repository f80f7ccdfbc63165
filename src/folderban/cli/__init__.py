"""CLI argument parser and dispatch for folderban."""

import argparse

from folderban.cli.board import board_summary
from folderban.cli.column import column_add, column_list, column_remove, column_rename
from folderban.cli.init import init_board
from folderban.cli.item import item_add, item_check, item_list, item_move, item_remove
from folderban.constants import DESCRIPTOR_NAME


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--board", default=DESCRIPTOR_NAME, help=f"Path to the board descriptor (default: {DESCRIPTOR_NAME})"
    )
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log file operations to stderr")

    parser = argparse.ArgumentParser(
        prog="folderban",
        description="Folder-based kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Initialize a board", parents=[common])
    init_p.add_argument("--column", dest="columns", action="append", help="Column to create (repeatable)")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[common])
    col_add_p.add_argument("name", help="Column name")
    col_add_p.set_defaults(func=column_add)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("name", help="Current column name")
    col_rename_p.add_argument("new_name", help="New column name")
    col_rename_p.set_defaults(func=column_rename)

    col_remove_p = col_verbs.add_parser("remove", help="Remove a column", parents=[common])
    col_remove_p.add_argument("name", help="Column name")
    col_remove_p.add_argument("--force", action="store_true", help="Delete the column's items too")
    col_remove_p.set_defaults(func=column_remove)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- item ---
    item_p = nouns.add_parser("item", help="Item operations", parents=[common])
    item_verbs = item_p.add_subparsers(dest="verb")

    item_list_p = item_verbs.add_parser("list", help="List items", parents=[common])
    item_list_p.add_argument("--column", dest="column", help="Only this column")
    item_list_p.set_defaults(func=item_list)

    item_add_p = item_verbs.add_parser("add", help="Create an item", parents=[common])
    item_add_p.add_argument("title", help="Item title")
    item_add_p.add_argument("--column", dest="column", help="Target column (default: first)")
    item_add_p.add_argument("--done", action="store_true", help="Create the item already done")
    item_add_p.set_defaults(func=item_add)

    item_move_p = item_verbs.add_parser("move", help="Move an item", parents=[common])
    item_move_p.add_argument("title", help="Item title")
    item_move_p.add_argument("--from", dest="source", help="Column the item is in")
    item_move_p.add_argument("--column", dest="column", required=True, help="Target column")
    item_move_p.set_defaults(func=item_move)

    item_check_p = item_verbs.add_parser("check", help="Mark an item done", parents=[common])
    item_check_p.add_argument("title", help="Item title")
    item_check_p.add_argument("--from", dest="source", help="Column the item is in")
    item_check_p.add_argument("--undo", action="store_true", help="Mark as not done")
    item_check_p.set_defaults(func=item_check)

    item_remove_p = item_verbs.add_parser("remove", help="Remove an item", parents=[common])
    item_remove_p.add_argument("title", help="Item title")
    item_remove_p.add_argument("--from", dest="source", help="Column the item is in")
    item_remove_p.set_defaults(func=item_remove)

    # item with no verb = list
    item_p.set_defaults(func=item_list, column=None)

    return parser

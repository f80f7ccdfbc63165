"""Item mutation operations for folderban boards.

These only change the in-memory board; save_board reconciles the files.
"""

from folderban.models import Board, Column, Item


def create_item(
    board: Board,
    title: str,
    column: Column | None = None,
    checked: bool = False,
    meta: dict | None = None,
) -> Item:
    """Create a new item (with no file yet) and add it to a column.

    Defaults to the first column. Raises ValueError if the board has none.
    """
    target = column
    if target is None:
        if not board.columns:
            raise ValueError("board has no columns")
        target = board.columns[0]

    item = Item(title=title, checked=checked, meta=dict(meta or {}))
    target.items.append(item)
    return item


def find_item_column(board: Board, item: Item) -> Column | None:
    """Find the column containing an item."""
    for col in board.columns:
        if any(i is item for i in col.items):
            return col
    return None


def find_items(board: Board, title: str, column: Column | None = None) -> list[Item]:
    """Return items whose title matches, case-insensitively."""
    needle = title.lower()
    columns = [column] if column is not None else board.columns
    return [item for col in columns for item in col.items if item.title_search == needle]


def _detach(column: Column, item: Item) -> None:
    column.items[:] = [i for i in column.items if i is not item]


def move_item(board: Board, item: Item, target: Column) -> None:
    """Move an item to the end of target."""
    source = find_item_column(board, item)
    if source is not None:
        _detach(source, item)
    target.items.append(item)


def set_checked(item: Item, checked: bool = True) -> None:
    """Mark an item done or not done."""
    item.checked = checked


def remove_item(board: Board, item: Item) -> None:
    """Remove an item from the board. Its file is deleted on next save."""
    col = find_item_column(board, item)
    if col is not None:
        _detach(col, item)

"""Column mutation operations for folderban boards."""

from folderban.ids import title_key
from folderban.models import Board, Column


def validate_title(title: str) -> str:
    """Check a column title can be used as a directory name."""
    title = title.strip()
    if not title or title in (".", "..") or title.startswith("."):
        raise ValueError(f"invalid column title: {title!r}")
    if "/" in title or "\\" in title:
        raise ValueError(f"column title may not contain a path separator: {title!r}")
    return title


def find_column(board: Board, title: str) -> Column | None:
    """Lookup a column by title."""
    for col in board.columns:
        if col.title == title:
            return col
    return None


def create_column(board: Board, title: str) -> Column:
    """Create a new, empty column and add it in title order.

    Raises ValueError if the title is invalid or already used.
    """
    title = validate_title(title)
    if find_column(board, title) is not None:
        raise ValueError(f"column {title!r} already exists")
    col = Column(title=title)
    board.columns.append(col)
    board.columns.sort(key=lambda c: title_key(c.title))
    return col


def rename_column(board: Board, column: Column, new_title: str) -> None:
    """Rename a column. Its items' files move to the new directory on save."""
    new_title = validate_title(new_title)
    existing = find_column(board, new_title)
    if existing is not None and existing is not column:
        raise ValueError(f"column {new_title!r} already exists")
    column.title = new_title


def remove_column(board: Board, column: Column) -> None:
    """Remove a column and its items. Their files are deleted on next save."""
    board.columns[:] = [c for c in board.columns if c is not column]

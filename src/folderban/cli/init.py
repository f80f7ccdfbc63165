"""Handler for 'folderban init'."""

import asyncio
from pathlib import Path

from folderban.cli._common import error, output_json, save
from folderban.config import BOARD_DEFAULTS
from folderban.fs import LocalFileSystem
from folderban.model.column import create_column
from folderban.model.layout import is_folder_layout
from folderban.model.loader import load_board
from folderban.models import Board

DEFAULT_COLUMNS = ("Todo", "Doing", "Done")


def init_board(args) -> int:
    """Initialize a folder board next to the descriptor."""
    descriptor = Path(args.board).resolve()

    if descriptor.exists() and asyncio.run(is_folder_layout(LocalFileSystem(), descriptor.parent)):
        board = asyncio.run(load_board(descriptor))
        columns = [c.title for c in board.columns]
        if args.json:
            output_json({"board": str(descriptor), "columns": columns, "created": False})
        else:
            print(f"Board already initialized at {descriptor}")
        return 0

    if descriptor.exists():
        error(f"{descriptor} exists but is not a folder board", args.json)

    descriptor.parent.mkdir(parents=True, exist_ok=True)
    board = Board(root=descriptor.parent, descriptor=descriptor, meta={"settings": dict(BOARD_DEFAULTS)})
    for name in args.columns or DEFAULT_COLUMNS:
        create_column(board, name)
    save(board, args.json)

    columns = [c.title for c in board.columns]
    if args.json:
        output_json({"board": str(descriptor), "columns": columns, "created": True})
    else:
        print(f"Initialized board at {descriptor}")
        print(f"Columns: {', '.join(columns)}")

    return 0

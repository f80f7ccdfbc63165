"""Load a folder-based board from disk."""

import asyncio
import logging
from pathlib import Path

from folderban.config import read_settings
from folderban.constants import ITEM_SUFFIX
from folderban.errors import NoFolderLayout
from folderban.fs import LocalFileSystem
from folderban.ids import title_key
from folderban.model.layout import column_dirs
from folderban.models import Board, Column, Item
from folderban.parser import parse_document

logger = logging.getLogger(__name__)


def is_checked(meta: dict) -> bool:
    """An item is checked if completed or done is true, or status is "completed"."""
    return meta.get("completed") is True or meta.get("status") == "completed" or meta.get("done") is True


def derive_title(meta: dict, heading: str | None, stem: str) -> str:
    """Pick the title: front-matter title, then first heading, then file name."""
    title = meta.get("title")
    if title is not None and str(title):
        return str(title)
    if heading:
        return heading
    return stem


def hydrate_item(path: Path, text: str) -> Item:
    """Build an Item from one file's content.

    Raises ParseError if the front-matter is malformed.
    """
    doc = parse_document(text)
    return Item(
        title=derive_title(doc.meta, doc.heading, path.stem),
        checked=is_checked(doc.meta),
        meta=dict(doc.meta),
        file=path,
        parent_id=doc.meta.get("parent_id"),
        body=doc.body,
    )


async def _load_item(fs: LocalFileSystem, path: Path) -> Item:
    text = await fs.read_text(path)
    return hydrate_item(path, text)


async def hydrate_column(
    fs: LocalFileSystem,
    directory: Path,
    errors: list[str] | None = None,
    skipped: set[Path] | None = None,
) -> Column:
    """Build a Column from a directory's direct .md children.

    Files that fail to read or parse are logged, recorded in ``errors``
    and ``skipped``, and left out. Items are sorted by title.
    """
    column = Column(title=directory.name)
    entries = await fs.scandir(directory)
    paths = [e.path for e in entries if not e.is_dir and e.path.suffix == ITEM_SUFFIX]

    results = await asyncio.gather(*(_load_item(fs, p) for p in paths), return_exceptions=True)

    for path, result in zip(paths, results):
        if isinstance(result, Exception):
            logger.warning("skipping item file %s: %s", path, result)
            if errors is not None:
                errors.append(f"{path}: {result}")
            if skipped is not None:
                skipped.add(path)
            continue
        column.items.append(result)

    column.items.sort(key=lambda item: title_key(item.title))
    return column


def enrich_board(board: Board) -> Board:
    """Attach computed fields to a freshly loaded board."""
    board.item_count = 0
    board.checked_count = 0
    for col_index, column in enumerate(board.columns):
        column.index = col_index
        for item_index, item in enumerate(column.items):
            item.index = item_index
            board.item_count += 1
            if item.checked:
                board.checked_count += 1
    return board


async def hydrate_board(fs: LocalFileSystem, descriptor: Path, text: str) -> Board:
    """Build a Board from the descriptor text and the column directories beside it.

    Raises NoFolderLayout if the board root has no column directories.
    """
    doc = parse_document(text)
    root = descriptor.parent
    board = Board(
        root=root,
        descriptor=descriptor,
        meta=doc.meta,
        settings=read_settings(doc.meta),
        body=doc.body,
    )

    dirs = await column_dirs(fs, root)
    if not dirs:
        raise NoFolderLayout(root)

    logger.debug("loading %d columns from %s", len(dirs), root)
    results = await asyncio.gather(
        *(hydrate_column(fs, d.path, board.errors, board.skipped) for d in dirs),
        return_exceptions=True,
    )
    for entry, result in zip(dirs, results):
        if isinstance(result, Exception):
            logger.warning("skipping column %s: %s", entry.path, result)
            board.errors.append(f"{entry.path}: {result}")
            continue
        board.columns.append(result)
    board.columns.sort(key=lambda col: title_key(col.title))
    board.source_columns = {col.title for col in board.columns}

    return enrich_board(board)


async def read_descriptor(fs: LocalFileSystem, descriptor: Path) -> str:
    """Read the descriptor, treating a missing file as empty."""
    if await fs.resolve(descriptor) != "file":
        return ""
    return await fs.read_text(descriptor)


async def load_board(descriptor: str | Path, fs: LocalFileSystem | None = None) -> Board:
    """Load a complete board from its descriptor path."""
    descriptor = Path(descriptor).absolute()
    if fs is None:
        fs = LocalFileSystem()
    text = await read_descriptor(fs, descriptor)
    return await hydrate_board(fs, descriptor, text)

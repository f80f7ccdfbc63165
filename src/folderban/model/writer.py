"""Save a board back to its folder tree.

Each item is created, updated in place, or moved between column
directories depending on its back-reference. Once every item has
settled, files no item claims are deleted.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from folderban.constants import FRONT_MATTER_KEY, FRONT_MATTER_VALUE, ITEM_SUFFIX
from folderban.errors import BoardRootMissing
from folderban.fs import LocalFileSystem
from folderban.ids import title_key
from folderban.model.loader import derive_title, enrich_board
from folderban.model.names import allocate_path, sanitize_name
from folderban.models import Board, Column, Item
from folderban.parser import first_heading, serialize_document

logger = logging.getLogger(__name__)

DESCRIPTOR_BODY = (
    "# Board\n\n"
    "This board uses folder structure for columns and items.\n\n"
    "Each folder represents a column, and each .md file in the folder represents an item.\n"
)


# --- Content ---


def item_front_matter(item: Item, name: str) -> dict:
    """Build the front-matter written for an item stored as ``name``.md."""
    meta = dict(item.meta)

    if item.checked:
        meta["completed"] = True
    else:
        meta.pop("completed", None)
        if meta.get("done") is True:
            del meta["done"]
        if meta.get("status") == "completed":
            del meta["status"]

    meta["parent_id"] = item.parent_id
    if meta.get("aliases") is None:
        meta["aliases"] = []
    if meta.get("tags") is None:
        meta["tags"] = []

    # Keep the title when the file itself would not give it back
    if meta.get("title") or derive_title({}, first_heading(item.body), name) != item.title:
        meta["title"] = item.title

    meta["id"] = name
    return meta


def render_item(item: Item, name: str) -> str:
    """Serialize an item as the full text of ``name``.md."""
    return serialize_document(item_front_matter(item, name), item.body)


def render_descriptor(board: Board) -> str:
    """Serialize the board descriptor (board.md)."""
    meta = {FRONT_MATTER_KEY: FRONT_MATTER_VALUE, **board.meta}
    return serialize_document(meta, board.body or DESCRIPTOR_BODY)


# --- Item operations ---


@dataclass
class _SaveContext:
    fs: LocalFileSystem
    root: Path
    fallback: str
    # paths already claimed during this save, including every known back-reference
    reserved: set[Path] = field(default_factory=set)
    # names chosen for new items before the fan-out, keyed by item id
    planned: dict[str, Path] = field(default_factory=dict)


def column_dir(root: Path, title: str) -> Path:
    """Return the directory for a column title.

    Raises ValueError if the title cannot be a single directory name.
    """
    if not title or title in (".", "..") or "/" in title or "\\" in title:
        raise ValueError(f"invalid column title: {title!r}")
    return root / title


async def _create_item(ctx: _SaveContext, item: Item, directory: Path) -> None:
    await ctx.fs.make_dir(directory)
    base = sanitize_name(item.title, ctx.fallback)
    path = ctx.planned.pop(item.id, None)
    while True:
        if path is None:
            path = await allocate_path(ctx.fs, directory, base, ctx.reserved)
        try:
            await ctx.fs.create_text(path, render_item(item, path.stem))
        except FileExistsError:
            path = None
            continue
        logger.debug("created %s", path)
        item.file = path
        return


async def _update_item(ctx: _SaveContext, item: Item) -> None:
    await ctx.fs.write_text(item.file, render_item(item, item.file.stem))
    logger.debug("updated %s", item.file)


async def _move_item(ctx: _SaveContext, item: Item, directory: Path) -> None:
    source = item.file
    if await ctx.fs.resolve(source) != "file":
        logger.warning("%s no longer exists, recreating it in %s", source, directory)
        await _create_item(ctx, item, directory)
        return

    await ctx.fs.make_dir(directory)
    target = directory / source.name
    if target in ctx.reserved or await ctx.fs.resolve(target) is not None:
        target = await allocate_path(ctx.fs, directory, source.stem, ctx.reserved)
    else:
        ctx.reserved.add(target)

    while True:
        try:
            await ctx.fs.rename(source, target)
            break
        except FileExistsError:
            target = await allocate_path(ctx.fs, directory, source.stem, ctx.reserved)

    logger.debug("moved %s to %s", source, target)
    item.file = target
    await ctx.fs.write_text(target, render_item(item, target.stem))


async def _plan_new_items(ctx: _SaveContext, columns: list[tuple[Column, Path]]) -> None:
    """Pick file names for new items one at a time, in column order."""
    for column, directory in columns:
        for item in column.items:
            if item.file is None:
                base = sanitize_name(item.title, ctx.fallback)
                try:
                    ctx.planned[item.id] = await allocate_path(ctx.fs, directory, base, ctx.reserved)
                except OSError as exc:
                    logger.warning("could not pick a name for %r in %s: %s", item.title, directory, exc)


async def save_item(ctx: _SaveContext, item: Item, column: Column) -> None:
    """Create, update or move one item's file to match its column."""
    directory = column_dir(ctx.root, column.title)
    if item.file is None:
        await _create_item(ctx, item, directory)
    elif item.file.parent == directory:
        await _update_item(ctx, item)
    else:
        await _move_item(ctx, item, directory)


# --- Orphan cleanup ---


async def _orphans(ctx: _SaveContext, directory: Path, claimed: set[Path]) -> list[Path]:
    if await ctx.fs.resolve(directory) != "dir":
        return []
    entries = await ctx.fs.scandir(directory)
    return [e.path for e in entries if not e.is_dir and e.path.suffix == ITEM_SUFFIX and e.path not in claimed]


async def _delete_orphans(ctx: _SaveContext, directory: Path, claimed: set[Path]) -> None:
    orphans = await _orphans(ctx, directory, claimed)
    results = await asyncio.gather(*(ctx.fs.delete(p) for p in orphans), return_exceptions=True)
    for path, result in zip(orphans, results):
        if isinstance(result, Exception):
            logger.warning("failed to delete orphaned file %s: %s", path, result)
        else:
            logger.debug("deleted orphaned file %s", path)


async def _remove_stale_column(ctx: _SaveContext, directory: Path, claimed: set[Path]) -> None:
    """Clear out a column directory that is no longer on the board."""
    await _delete_orphans(ctx, directory, claimed)
    if await ctx.fs.resolve(directory) == "dir" and not await ctx.fs.scandir(directory):
        await ctx.fs.remove_dir(directory)
        logger.debug("removed column directory %s", directory)


# --- Public API ---


async def _report(what: str, coros: list, labels: list[str]) -> int:
    """Await coros concurrently, logging each failure. Returns the failure count."""
    results = await asyncio.gather(*coros, return_exceptions=True)
    failed = 0
    for label, result in zip(labels, results):
        if isinstance(result, Exception):
            failed += 1
            logger.error("failed to %s %s: %s", what, label, result)
    return failed


async def save_board(board: Board, fs: LocalFileSystem | None = None) -> None:
    """Reconcile the folder tree with the in-memory board.

    Per-file failures are logged and never abort the save. Raises
    BoardRootMissing if the board root directory does not exist.
    """
    if fs is None:
        fs = LocalFileSystem(board.settings["concurrency"])
    root = board.root
    if await fs.resolve(root) != "dir":
        raise BoardRootMissing(root)

    ctx = _SaveContext(fs=fs, root=root, fallback=board.settings["fallback_name"])
    ctx.reserved = {item.file for column in board.columns for item in column.items if item.file is not None}

    if board.settings["save_descriptor"]:
        await _report("write", [fs.write_text(board.descriptor, render_descriptor(board))], [str(board.descriptor)])

    # Empty columns still need their directory
    valid = []
    for column in board.columns:
        try:
            valid.append((column, column_dir(root, column.title)))
        except ValueError as exc:
            logger.error("skipping column: %s", exc)
    dirs = [d for _, d in valid]
    await _report("create directory", [fs.make_dir(d) for d in dirs], [str(d) for d in dirs])

    await _plan_new_items(ctx, valid)

    pairs = [(item, column) for column in board.columns for item in column.items]
    failed = await _report(
        "save item",
        [save_item(ctx, item, column) for item, column in pairs],
        [f"{item.title!r} in {column.title!r}" for item, column in pairs],
    )

    # Only after every item has settled: a file may pass through another column mid-move
    claimed = {item.file for item, _ in pairs if item.file is not None} | board.skipped
    titles = {column.title for column in board.columns}
    stale = [root / title for title in board.source_columns - titles if (root / title) not in dirs]
    await _report("clean up", [_delete_orphans(ctx, d, claimed) for d in dirs], [str(d) for d in dirs])
    await _report("remove column", [_remove_stale_column(ctx, d, claimed) for d in stale], [str(d) for d in stale])

    board.columns.sort(key=lambda col: title_key(col.title))
    board.source_columns = titles
    enrich_board(board)
    logger.debug("saved %d items to %s (%d failed)", len(pairs), root, failed)

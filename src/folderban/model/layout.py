"""Detect whether a directory holds a folder-based board."""

from pathlib import Path

from folderban.fs import Entry, LocalFileSystem


def is_column_dir(entry: Entry) -> bool:
    """Any visible subdirectory is a column, even if it holds no items."""
    return entry.is_dir and not entry.name.startswith(".")


async def column_dirs(fs: LocalFileSystem, root: Path) -> list[Entry]:
    """Return the column directories directly under root, or [] if root is missing."""
    try:
        entries = await fs.scandir(root)
    except (FileNotFoundError, NotADirectoryError):
        return []
    return [e for e in entries if is_column_dir(e)]


async def is_folder_layout(fs: LocalFileSystem, root: Path) -> bool:
    """True if root has at least one column directory."""
    return bool(await column_dirs(fs, root))

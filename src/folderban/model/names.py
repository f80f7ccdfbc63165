"""Collision-free file names for item files."""

import re
from pathlib import Path

from folderban.constants import ITEM_SUFFIX
from folderban.fs import LocalFileSystem

FALLBACK_NAME = "untitled"

_UNSAFE = re.compile(r"[^A-Za-z0-9 _-]")


def sanitize_name(title: str, fallback: str = FALLBACK_NAME) -> str:
    """Strip a title down to a safe file base name.

    "My Task!!" -> "My Task", "!!!" -> "untitled"
    """
    name = _UNSAFE.sub("", title).strip()
    return name or fallback


def _candidate(directory: Path, base: str, n: int) -> Path:
    if n == 0:
        return directory / f"{base}{ITEM_SUFFIX}"
    return directory / f"{base}_{n}{ITEM_SUFFIX}"


async def allocate_path(
    fs: LocalFileSystem,
    directory: Path,
    base: str,
    reserved: set[Path] | None = None,
) -> Path:
    """Return the first unused path of base.md, base_1.md, base_2.md, ...

    Paths in ``reserved`` count as taken, and the returned path is added
    to it, so concurrent allocations within one save never collide.
    """
    if reserved is None:
        reserved = set()
    n = 0
    while True:
        path = _candidate(directory, base, n)
        # re-check reserved after the await: another task may have claimed it
        if path not in reserved and await fs.resolve(path) is None and path not in reserved:
            reserved.add(path)
            return path
        n += 1

"""Async file-system primitives used by the loader and writer.

Every operation runs the blocking pathlib call via asyncio.to_thread,
bounded by a semaphore so a large board does not open every file at once.
"""

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """A direct child of a directory."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


def _scandir(path: Path) -> list[Entry]:
    with os.scandir(path) as it:
        entries = [Entry(Path(e.path), e.is_dir(follow_symlinks=True)) for e in it]
    entries.sort(key=lambda e: e.name)
    return entries


def _resolve(path: Path) -> str | None:
    if path.is_dir():
        return "dir"
    if path.exists():
        return "file"
    return None


def _create_text(path: Path, text: str) -> None:
    with open(path, "x", encoding="utf-8") as f:
        f.write(text)


def _rename(src: Path, dst: Path) -> None:
    # os.rename silently replaces an existing file on POSIX
    if dst.exists():
        raise FileExistsError(f"{dst} already exists")
    src.rename(dst)


class LocalFileSystem:
    """Async wrapper around the local file system."""

    def __init__(self, concurrency: int = 16) -> None:
        self._limit = asyncio.Semaphore(concurrency)

    async def _run(self, func, *args):
        async with self._limit:
            return await asyncio.to_thread(func, *args)

    async def scandir(self, path: Path) -> list[Entry]:
        """List the direct children of a directory, sorted by name."""
        return await self._run(_scandir, Path(path))

    async def resolve(self, path: Path) -> str | None:
        """Return "dir", "file", or None if nothing exists at path."""
        return await self._run(_resolve, Path(path))

    async def read_text(self, path: Path) -> str:
        return await self._run(Path(path).read_text, "utf-8")

    async def write_text(self, path: Path, text: str) -> None:
        """Write text, replacing any existing content."""
        await self._run(Path(path).write_text, text, "utf-8")

    async def create_text(self, path: Path, text: str) -> None:
        """Create a new file. Raises FileExistsError if path is taken."""
        await self._run(_create_text, Path(path), text)

    async def make_dir(self, path: Path) -> None:
        await self._run(lambda: Path(path).mkdir(parents=True, exist_ok=True))

    async def delete(self, path: Path) -> None:
        await self._run(Path(path).unlink)

    async def remove_dir(self, path: Path) -> None:
        """Remove an empty directory. Raises OSError if it is not empty."""
        await self._run(Path(path).rmdir)

    async def rename(self, src: Path, dst: Path) -> None:
        """Move src to dst. Raises FileExistsError if dst is taken."""
        await self._run(_rename, Path(src), Path(dst))

"""Shared board state and the two-phase load protocol.

Callers that need a board right away get an empty provisional board from
``begin_load``/``begin_reparse``. The real board is hydrated in a
background task and then installed into ``BoardState`` wholesale, which
notifies its watchers.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable

from folderban.config import read_settings
from folderban.errors import ParseError
from folderban.fs import LocalFileSystem
from folderban.model.loader import hydrate_board, read_descriptor
from folderban.model.writer import save_board
from folderban.models import Board
from folderban.parser import parse_document

logger = logging.getLogger(__name__)

Callback = Callable[["BoardState", str, Any, Any], None]


class BoardState:
    """Owned container for the active board.

    Watch ``"board"`` for replacements and ``"error"`` for fatal errors.
    """

    def __init__(self) -> None:
        self._board: Board | None = None
        self._error: Exception | None = None
        self._watchers: dict[str, list[Callback]] = {}
        self._version = 0

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def error(self) -> Exception | None:
        return self._error

    @property
    def version(self) -> int:
        return self._version

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a key for changes. Returns an unwatch callable."""
        self._watchers.setdefault(key, []).append(callback)

        def unwatch() -> None:
            watchers = self._watchers.get(key, [])
            if callback in watchers:
                watchers.remove(callback)

        return unwatch

    def _emit(self, key: str, old: Any, new: Any) -> None:
        for cb in list(self._watchers.get(key, ())):
            cb(self, key, old, new)

    def replace(self, board: Board) -> None:
        """Install a new board, clearing any previous error."""
        old = self._board
        self._board = board
        self._version += 1
        if self._error is not None:
            self.clear_error()
        self._emit("board", old, board)

    def set_error(self, error: Exception) -> None:
        old = self._error
        self._error = error
        self._emit("error", old, error)

    def clear_error(self) -> None:
        old = self._error
        self._error = None
        self._emit("error", old, None)


def provisional_board(descriptor: Path, text: str = "") -> Board:
    """Empty board to show while the real one loads."""
    try:
        meta = parse_document(text).meta
    except ParseError:
        meta = {}
    return Board(root=descriptor.parent, descriptor=descriptor, meta=meta, settings=read_settings(meta))


class BoardSession:
    """Owns the board for one descriptor: loading, reparsing and saving.

    Only the most recent load may install its result. Completions from
    superseded loads are dropped.
    """

    def __init__(
        self,
        descriptor: str | Path,
        state: BoardState | None = None,
        fs: LocalFileSystem | None = None,
    ) -> None:
        self.descriptor = Path(descriptor).absolute()
        self.state = state if state is not None else BoardState()
        self.fs = fs if fs is not None else LocalFileSystem()
        self.pending: asyncio.Task | None = None
        self._generation = 0

    def begin_load(self, text: str) -> Board:
        """Start hydrating from descriptor text; return a provisional board now.

        Must be called with a running event loop.
        """
        return self._begin(provisional_board(self.descriptor, text), self._load(text))

    def begin_reparse(self) -> Board:
        """Start re-reading the descriptor and columns; return a provisional board now."""
        return self._begin(provisional_board(self.descriptor), self._reload())

    def _begin(self, placeholder: Board, coro) -> Board:
        loop = asyncio.get_running_loop()
        self._generation += 1
        self.pending = loop.create_task(self._complete(self._generation, coro))
        return placeholder

    async def _load(self, text: str) -> Board:
        return await hydrate_board(self.fs, self.descriptor, text)

    async def _reload(self) -> Board:
        text = await read_descriptor(self.fs, self.descriptor)
        return await hydrate_board(self.fs, self.descriptor, text)

    async def _complete(self, generation: int, coro) -> Board | None:
        try:
            board = await coro
        except Exception as exc:
            if generation != self._generation:
                logger.debug("ignoring failure of superseded load %d: %s", generation, exc)
                return None
            logger.error("failed to load board %s: %s", self.descriptor, exc)
            self.state.set_error(exc)
            return None

        if generation != self._generation:
            logger.debug("discarding superseded load %d", generation)
            return None

        self.state.replace(board)
        return board

    async def save(self, board: Board | None = None) -> None:
        """Save a board (default: the active one).

        Fatal errors are recorded in the shared state and re-raised.
        """
        if board is None:
            board = self.state.board
        if board is None:
            raise ValueError("no board loaded")
        try:
            await save_board(board, self.fs)
        except Exception as exc:
            logger.error("failed to save board %s: %s", self.descriptor, exc)
            self.state.set_error(exc)
            raise

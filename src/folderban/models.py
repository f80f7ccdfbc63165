"""Data models for folderban boards."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from folderban.config import read_settings
from folderban.constants import CHECKED_CHAR, UNCHECKED_CHAR
from folderban.ids import new_instance_id


@dataclass
class Item:
    """A task, backed by at most one file.

    ``file`` is the back-reference used to decide create, update or move
    on save. It is never written into front-matter.
    """

    title: str
    checked: bool = False
    meta: dict[str, Any] = field(default_factory=dict)
    file: Path | None = None
    parent_id: Any = None
    body: str = ""
    id: str = field(default_factory=new_instance_id)
    index: int = 0

    @property
    def check_char(self) -> str:
        return CHECKED_CHAR if self.checked else UNCHECKED_CHAR

    @property
    def title_search(self) -> str:
        return self.title.lower()


@dataclass
class Column:
    """A column, backed one-to-one by a directory named after its title."""

    title: str
    items: list[Item] = field(default_factory=list)
    id: str = field(default_factory=new_instance_id)
    index: int = 0


@dataclass
class Board:
    """The full board state."""

    root: Path
    descriptor: Path
    columns: list[Column] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    settings: dict[str, Any] = field(default_factory=lambda: read_settings(None))
    errors: list[str] = field(default_factory=list)
    body: str = ""
    id: str = field(default_factory=new_instance_id)
    item_count: int = 0
    checked_count: int = 0
    # column titles whose directories were part of the board when it was loaded
    source_columns: set[str] = field(default_factory=set)
    # files that failed to load; never treated as orphans
    skipped: set[Path] = field(default_factory=set)

    @property
    def title(self) -> str:
        return str(self.meta.get("title") or self.root.name)

"""Board model: load, edit and save folder-based boards."""

from folderban.model.column import create_column, find_column, remove_column, rename_column
from folderban.model.item import create_item, find_item_column, find_items, move_item, remove_item, set_checked
from folderban.model.layout import is_folder_layout
from folderban.model.loader import hydrate_board, hydrate_column, hydrate_item, load_board
from folderban.model.names import allocate_path, sanitize_name
from folderban.model.writer import render_item, save_board

__all__ = [
    "allocate_path",
    "create_column",
    "create_item",
    "find_column",
    "find_item_column",
    "find_items",
    "hydrate_board",
    "hydrate_column",
    "hydrate_item",
    "is_folder_layout",
    "load_board",
    "move_item",
    "remove_column",
    "remove_item",
    "render_item",
    "rename_column",
    "sanitize_name",
    "save_board",
    "set_checked",
]

"""Names and markers shared across folderban."""

DESCRIPTOR_NAME = "board.md"
ITEM_SUFFIX = ".md"

FRONT_MATTER_KEY = "kanban-plugin"
FRONT_MATTER_VALUE = "board"

CHECKED_CHAR = "x"
UNCHECKED_CHAR = " "

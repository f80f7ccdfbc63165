"""Exceptions raised by folderban."""


class FolderbanError(Exception):
    """Base class for folderban errors."""


class NoFolderLayout(FolderbanError):
    """The board root has no column directories."""

    def __init__(self, root):
        super().__init__(f"No folder structure found for board at {root}")
        self.root = root


class BoardRootMissing(FolderbanError):
    """The board root directory cannot be resolved."""

    def __init__(self, root):
        super().__init__(f"Board folder not found: {root}")
        self.root = root


class ParseError(FolderbanError):
    """Front-matter of a document could not be parsed."""

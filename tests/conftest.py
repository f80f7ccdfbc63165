"""Shared fixtures: board directory trees on disk."""

import pytest

from folderban.fs import LocalFileSystem


def write_item(path, meta_lines="", body=""):
    """Write an item file with optional front-matter lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = f"---\n{meta_lines}---\n{body}" if meta_lines else body
    path.write_text(text)
    return path


@pytest.fixture
def fs():
    return LocalFileSystem()


@pytest.fixture
def board_dir(tmp_path):
    """A board with three columns, one of them empty."""
    root = tmp_path / "board"
    root.mkdir()
    (root / "board.md").write_text("---\nkanban-plugin: board\nowner: sam\n---\n\n# Board\n")
    write_item(root / "Todo" / "write docs.md", "title: Write docs\ntags:\n- docs\n")
    write_item(root / "Todo" / "fix bug.md", "", "# Fix the bug\n\nIt crashes.\n")
    write_item(root / "Done" / "release.md", "completed: true\nparent_id: abc\n")
    (root / "Doing").mkdir()
    return root

"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from ..conftest import write_item


@pytest.fixture
def initialized_board(tmp_path):
    """A board with three columns and two items in Todo."""
    write_item(tmp_path / "Todo" / "First card.md", "title: First card\n")
    write_item(tmp_path / "Todo" / "Second card.md", "title: Second card\n")
    (tmp_path / "Doing").mkdir()
    (tmp_path / "Done").mkdir()
    (tmp_path / "board.md").write_text("---\nkanban-plugin: board\n---\n")
    return tmp_path / "board.md"


def make_args(board, json=False, **kwargs):
    return Namespace(board=str(board), json=json, verbose=False, **kwargs)

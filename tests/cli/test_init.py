"""Tests for 'folderban init'."""

import json

import pytest

from folderban.cli.init import init_board

from .conftest import make_args


def test_init_creates_board(tmp_path, capsys):
    args = make_args(tmp_path / "board.md", columns=None)
    assert init_board(args) == 0

    out = capsys.readouterr().out
    assert "Initialized board" in out
    assert (tmp_path / "board.md").exists()
    assert sorted(p.name for p in tmp_path.iterdir() if p.is_dir()) == ["Doing", "Done", "Todo"]


def test_init_custom_columns(tmp_path, capsys):
    args = make_args(tmp_path / "board.md", json=True, columns=["Backlog", "Shipped"])
    assert init_board(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {
        "board": str((tmp_path / "board.md").resolve()),
        "columns": ["Backlog", "Shipped"],
        "created": True,
    }


def test_init_writes_default_settings(tmp_path):
    init_board(make_args(tmp_path / "board.md", columns=None))
    text = (tmp_path / "board.md").read_text()
    assert "kanban-plugin: board" in text
    assert "fallback-name: untitled" in text


def test_init_existing_board(initialized_board, capsys):
    args = make_args(initialized_board, json=True, columns=None)
    assert init_board(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["created"] is False
    assert data["columns"] == ["Doing", "Done", "Todo"]


def test_init_refuses_single_file_board(tmp_path, capsys):
    descriptor = tmp_path / "board.md"
    original = "---\nkanban-plugin: basic\n---\n\n## Todo\n\n- [ ] keep me\n"
    descriptor.write_text(original)

    with pytest.raises(SystemExit, match="1"):
        init_board(make_args(descriptor, columns=None))

    assert "not a folder board" in capsys.readouterr().err
    assert descriptor.read_text() == original
    assert not any(p.is_dir() for p in tmp_path.iterdir())

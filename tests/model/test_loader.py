"""Tests for the board loader."""

import pytest

from folderban.errors import NoFolderLayout
from folderban.model.loader import hydrate_board, hydrate_column, hydrate_item, is_checked, load_board
from folderban.models import Board, Column, Item

from ..conftest import write_item


# --- Item hydration ---


def test_title_from_front_matter_beats_heading(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "---\ntitle: Foo\n---\n# Bar\n")
    assert item.title == "Foo"


def test_title_from_heading(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "# Bar\n\nBody.\n")
    assert item.title == "Bar"


def test_title_from_file_name(tmp_path):
    item = hydrate_item(tmp_path / "my task.md", "Just a body.\n")
    assert item.title == "my task"


def test_title_ignores_later_heading(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "Intro first.\n\n# Heading\n")
    assert item.title == "t"


@pytest.mark.parametrize(
    "meta,expected",
    [
        ({"completed": True}, True),
        ({"status": "completed"}, True),
        ({"done": True}, True),
        ({"status": "Completed"}, False),
        ({"completed": "true"}, False),
        ({"completed": False}, False),
        ({}, False),
    ],
)
def test_is_checked(meta, expected):
    assert is_checked(meta) is expected


def test_checked_item_has_x_marker(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "---\ndone: true\n---\n")
    assert item.checked is True
    assert item.check_char == "x"


def test_unchecked_item_has_space_marker(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "---\nstatus: Completed\n---\n")
    assert item.checked is False
    assert item.check_char == " "


def test_item_meta_and_back_reference(tmp_path):
    path = tmp_path / "t.md"
    item = hydrate_item(path, "---\npriority: 2\nparent_id: p1\n---\n")
    assert item.meta == {"priority": 2, "parent_id": "p1"}
    assert item.file == path
    assert "file" not in item.meta
    assert item.parent_id == "p1"


def test_item_without_parent_id(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "# T\n")
    assert item.parent_id is None


def test_item_search_key(tmp_path):
    item = hydrate_item(tmp_path / "t.md", "---\ntitle: Mixed Case\n---\n")
    assert item.title_search == "mixed case"


def test_item_ids_are_fresh(tmp_path):
    a = hydrate_item(tmp_path / "t.md", "# T\n")
    b = hydrate_item(tmp_path / "t.md", "# T\n")
    assert a.id != b.id


# --- Column hydration ---


@pytest.mark.asyncio
async def test_column_title_is_directory_name(tmp_path, fs):
    write_item(tmp_path / "In Progress" / "a.md", "title: Something else\n")
    column = await hydrate_column(fs, tmp_path / "In Progress")
    assert column.title == "In Progress"


@pytest.mark.asyncio
async def test_column_items_sorted_by_title(tmp_path, fs):
    directory = tmp_path / "Todo"
    write_item(directory / "1.md", "title: Charlie\n")
    write_item(directory / "2.md", "title: Alpha\n")
    write_item(directory / "3.md", "title: Bravo\n")
    column = await hydrate_column(fs, directory)
    assert [i.title for i in column.items] == ["Alpha", "Bravo", "Charlie"]


@pytest.mark.asyncio
async def test_column_only_direct_md_files(tmp_path, fs):
    directory = tmp_path / "Todo"
    write_item(directory / "a.md", "", "# A\n")
    write_item(directory / "notes.txt", "", "not an item")
    write_item(directory / "nested" / "b.md", "", "# B\n")
    column = await hydrate_column(fs, directory)
    assert [i.title for i in column.items] == ["A"]


@pytest.mark.asyncio
async def test_column_skips_malformed_file(tmp_path, fs, caplog):
    directory = tmp_path / "Todo"
    write_item(directory / "good.md", "title: Good\n")
    write_item(directory / "bad.md", "title: [unclosed\n")
    errors = []
    skipped = set()
    column = await hydrate_column(fs, directory, errors, skipped)
    assert [i.title for i in column.items] == ["Good"]
    assert len(errors) == 1
    assert skipped == {directory / "bad.md"}
    assert "bad.md" in caplog.text


@pytest.mark.asyncio
async def test_column_skips_undecodable_file(tmp_path, fs):
    directory = tmp_path / "Todo"
    directory.mkdir()
    (directory / "binary.md").write_bytes(b"\xff\xfe\x00bad")
    write_item(directory / "good.md", "", "# Good\n")
    column = await hydrate_column(fs, directory)
    assert [i.title for i in column.items] == ["Good"]


@pytest.mark.asyncio
async def test_empty_column(tmp_path, fs):
    (tmp_path / "Empty").mkdir()
    column = await hydrate_column(fs, tmp_path / "Empty")
    assert isinstance(column, Column)
    assert column.items == []


# --- Board hydration ---


@pytest.mark.asyncio
async def test_load_board(board_dir):
    board = await load_board(board_dir / "board.md")
    assert isinstance(board, Board)
    assert [c.title for c in board.columns] == ["Doing", "Done", "Todo"]
    assert board.meta == {"kanban-plugin": "board", "owner": "sam"}
    assert board.root == board_dir


@pytest.mark.asyncio
async def test_load_board_keeps_empty_columns(board_dir):
    board = await load_board(board_dir / "board.md")
    doing = board.columns[0]
    assert doing.title == "Doing"
    assert doing.items == []


@pytest.mark.asyncio
async def test_load_board_items(board_dir):
    board = await load_board(board_dir / "board.md")
    todo = board.columns[2]
    assert [i.title for i in todo.items] == ["Fix the bug", "Write docs"]
    done = board.columns[1]
    assert done.items[0].checked is True
    assert done.items[0].parent_id == "abc"


@pytest.mark.asyncio
async def test_load_board_enrichment(board_dir):
    board = await load_board(board_dir / "board.md")
    assert board.item_count == 3
    assert board.checked_count == 1
    assert [c.index for c in board.columns] == [0, 1, 2]
    assert [i.index for i in board.columns[2].items] == [0, 1]


@pytest.mark.asyncio
async def test_load_board_records_source_columns(board_dir):
    board = await load_board(board_dir / "board.md")
    assert board.source_columns == {"Doing", "Done", "Todo"}


@pytest.mark.asyncio
async def test_load_board_settings(tmp_path):
    (tmp_path / "Todo").mkdir()
    (tmp_path / "board.md").write_text("---\nsettings:\n  fallback-name: task\n---\n")
    board = await load_board(tmp_path / "board.md")
    assert board.settings["fallback_name"] == "task"


@pytest.mark.asyncio
async def test_load_board_missing_descriptor(tmp_path):
    (tmp_path / "Todo").mkdir()
    board = await load_board(tmp_path / "board.md")
    assert board.meta == {}
    assert [c.title for c in board.columns] == ["Todo"]


@pytest.mark.asyncio
async def test_load_board_without_columns_fails(tmp_path):
    (tmp_path / "board.md").write_text("# Board\n")
    with pytest.raises(NoFolderLayout):
        await load_board(tmp_path / "board.md")


@pytest.mark.asyncio
async def test_load_board_ignores_hidden_directories(board_dir):
    (board_dir / ".git").mkdir()
    board = await load_board(board_dir / "board.md")
    assert ".git" not in [c.title for c in board.columns]


@pytest.mark.asyncio
async def test_load_board_collects_errors(board_dir):
    write_item(board_dir / "Todo" / "broken.md", "a: [\n")
    board = await load_board(board_dir / "board.md")
    assert len(board.errors) == 1
    assert board.skipped == {board_dir / "Todo" / "broken.md"}
    assert board.item_count == 3


@pytest.mark.asyncio
async def test_hydrate_board_uses_given_text(board_dir, fs):
    board = await hydrate_board(fs, board_dir / "board.md", "---\nowner: kim\n---\n")
    assert board.meta == {"owner": "kim"}


@pytest.mark.asyncio
async def test_ids_regenerated_each_load(board_dir):
    first = await load_board(board_dir / "board.md")
    second = await load_board(board_dir / "board.md")
    assert first.id != second.id
    assert first.columns[0].id != second.columns[0].id


def test_item_defaults():
    item = Item(title="New")
    assert item.file is None
    assert item.checked is False
    assert item.parent_id is None

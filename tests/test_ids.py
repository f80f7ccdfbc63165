"""Tests for instance IDs and title ordering."""

from folderban.ids import compare_titles, new_instance_id, title_key


def test_new_instance_id_is_unique():
    assert new_instance_id() != new_instance_id()


def test_compare_titles():
    assert compare_titles("a", "b") == -1
    assert compare_titles("b", "a") == 1
    assert compare_titles("a", "a") == 0


def test_title_key_sorts():
    assert sorted(["Doing", "Done", "Backlog"], key=title_key) == ["Backlog", "Doing", "Done"]

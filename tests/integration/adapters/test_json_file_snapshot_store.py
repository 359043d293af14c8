"""Integration tests for the JsonFileSnapshotStore adapter.

The store also passes the contract tests in
`tests/contract/snapshot_store/`. These are additional tests of its file
format and write behavior.
"""

import json

import pytest

from tasklane.adapters.snapshot_store import JsonFileSnapshotStore

# pylint: disable=magic-value-comparison


def test_creates_missing_parent_directories(tmp_path):
    """Writing creates the directories leading to the file."""
    path = tmp_path / "nested" / "dir" / "board.json"
    JsonFileSnapshotStore(path).write({"tasks": {}})
    assert path.is_file()


def test_file_is_indented_utf8_json(tmp_path):
    """The file is human-readable JSON ending with a newline."""
    path = tmp_path / "board.json"
    JsonFileSnapshotStore(str(path)).write({"tasks": {"t": {"title": "Café"}}})

    text = path.read_text(encoding="utf-8")

    assert text.endswith("}\n")
    assert '  "tasks"' in text
    assert "Café" in text
    assert json.loads(text) == {"tasks": {"t": {"title": "Café"}}}


def test_write_leaves_no_temporary_files(tmp_path):
    """Only the snapshot itself remains after repeated writes."""
    store = JsonFileSnapshotStore(tmp_path / "board.json")
    for n in range(3):
        store.write({"n": n})
    assert [p.name for p in tmp_path.iterdir()] == ["board.json"]
    assert store.read() == {"n": 2}


def test_reads_files_written_by_hand(tmp_path):
    """Any JSON file with the expected layout can be read."""
    path = tmp_path / "board.json"
    path.write_text('{"tasks": {"a": {"title": "A"}}}', encoding="utf-8")
    store = JsonFileSnapshotStore(path)
    assert store.path == path
    assert store.exists()
    assert store.read()["tasks"]["a"]["title"] == "A"


def test_directory_is_not_a_snapshot(tmp_path):
    """A directory at the path does not count as an existing snapshot."""
    assert JsonFileSnapshotStore(tmp_path).exists() is False


def test_failed_write_keeps_old_file_and_no_temporary_files(tmp_path):
    """A snapshot that cannot be serialized leaves the directory as it was."""
    store = JsonFileSnapshotStore(tmp_path / "board.json")
    store.write({"tasks": {}})

    with pytest.raises(TypeError):
        store.write({"tasks": {"t": {"title": object()}}})

    assert [p.name for p in tmp_path.iterdir()] == ["board.json"]
    assert store.read() == {"tasks": {}}

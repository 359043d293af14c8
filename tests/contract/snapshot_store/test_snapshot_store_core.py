"""Contract tests for SnapshotStore implementations."""

from __future__ import annotations

import copy

import pytest

from tasklane.interfaces.snapshot_store import SnapshotNotFoundError


def test_new_store_is_empty(store):
    """A fresh store holds no snapshot and says so."""
    assert store.exists() is False
    with pytest.raises(SnapshotNotFoundError):
        store.read()


def test_write_then_read(store, sample_snapshot):
    """What was written is read back equal."""
    store.write(sample_snapshot)
    assert store.exists() is True
    assert store.read() == sample_snapshot


def test_write_replaces(store, sample_snapshot):
    """A second write replaces the first one entirely."""
    store.write(sample_snapshot)
    store.write({"tasks": {}, "projects": {}, "milestones": {}})
    assert store.read() == {"tasks": {}, "projects": {}, "milestones": {}}


def test_store_is_isolated_from_callers(store, sample_snapshot):
    """Mutating written or read data does not change the stored snapshot."""
    expected = copy.deepcopy(sample_snapshot)
    store.write(sample_snapshot)
    sample_snapshot["tasks"]["t-1"]["tags"].append("mutated")

    first = store.read()
    first["tasks"].clear()

    assert store.read() == expected


def test_not_found_error_names_location(store):
    """The error says where no snapshot was found."""
    with pytest.raises(SnapshotNotFoundError) as excinfo:
        store.read()
    assert excinfo.value.location in str(excinfo.value)

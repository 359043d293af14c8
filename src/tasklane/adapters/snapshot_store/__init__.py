"""Snapshot store adapters."""

from .local import JsonFileSnapshotStore
from .memory import InMemorySnapshotStore

__all__ = ["InMemorySnapshotStore", "JsonFileSnapshotStore"]

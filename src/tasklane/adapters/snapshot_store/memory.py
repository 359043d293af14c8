"""In-memory snapshot store adapter."""

import copy
from collections.abc import Mapping
from typing import Any

from tasklane.interfaces.snapshot_store import SnapshotNotFoundError, SnapshotStore


class InMemorySnapshotStore(SnapshotStore):
    """SnapshotStore that keeps a deep copy of the snapshot in memory.

    Note:
        Primarily for tests; nothing survives the process.
    """

    def __init__(self) -> None:
        self._snapshot: dict[str, Any] | None = None

    def exists(self) -> bool:
        return self._snapshot is not None

    def read(self) -> dict[str, Any]:
        if self._snapshot is None:
            raise SnapshotNotFoundError("<memory>")
        return copy.deepcopy(self._snapshot)

    def write(self, snapshot: Mapping[str, Any]) -> None:
        self._snapshot = copy.deepcopy(dict(snapshot))

"""Interface for snapshot stores.

A snapshot store reads and writes the plain record produced by
`Repository.to_snapshot()`: a mapping with ``tasks``, ``projects`` and
``milestones`` collections, each keyed by entity id.
"""

import abc
from collections.abc import Mapping
from typing import Any


class SnapshotNotFoundError(LookupError):
    """Raised when a snapshot store holds no snapshot yet."""

    def __init__(self, location: str) -> None:
        super().__init__(f"No snapshot found at {location}.")
        self.location = location


class SnapshotStore(abc.ABC):
    """Contract for a store holding one repository snapshot."""

    @abc.abstractmethod
    def exists(self) -> bool:
        """Return True if a snapshot has been written."""

    @abc.abstractmethod
    def read(self) -> dict[str, Any]:
        """Read the snapshot.

        Raises:
            SnapshotNotFoundError: If no snapshot has been written.
        """

    @abc.abstractmethod
    def write(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the stored snapshot."""

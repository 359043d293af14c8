"""Bootstrap the repository with its identity provider and snapshot store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tasklane import config
from tasklane.adapters.snapshot_store import JsonFileSnapshotStore
from tasklane.domain.identity import IdentityProvider
from tasklane.service_layer.repositories import Repository

if TYPE_CHECKING:
    from pathlib import Path

    from tasklane.interfaces.id_generator import IdGenerator
    from tasklane.interfaces.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    repository: Repository
    snapshot_store: SnapshotStore | None = None

    def save(self) -> None:
        """Write the repository to the snapshot store, if there is one."""
        if self.snapshot_store is None:
            raise RuntimeError("No snapshot store configured")
        self.snapshot_store.write(self.repository.to_snapshot())


def build_snapshot_store(path: Path | None = None) -> SnapshotStore:
    """Build the JSON file snapshot store at `path`, or at the configured path.

    Raises:
        SnapshotPathNotSetError: If `path` is None and `TASKLANE_SNAPSHOT` is unset.
    """
    if path is None:
        path = config.get_snapshot_path()
    return JsonFileSnapshotStore(path)


def build_repository(id_generator: IdGenerator | None = None) -> Repository:
    """Build an empty repository.

    Args:
        id_generator: Source of entity ids; defaults to the configured one.
    """
    if id_generator is None:
        id_generator = config.build_id_generator()
    logger.debug("Using ID generator %s", type(id_generator).__name__)
    return Repository(IdentityProvider(id_generator))


def load_repository(
    store: SnapshotStore, id_generator: IdGenerator | None = None
) -> Repository:
    """Build a repository holding the snapshot of `store` (empty if there is none).

    Raises:
        SnapshotFormatError: If the stored snapshot is malformed.
    """
    repository = build_repository(id_generator)
    if store.exists():
        repository.load_snapshot(store.read())
    else:
        logger.info("No snapshot yet; starting empty")
    return repository


def bootstrap(
    store: SnapshotStore | None = None, id_generator: IdGenerator | None = None
) -> AppContainer:
    """Bootstrap the repository, loading the snapshot of `store` if given."""
    if store is None:
        return AppContainer(repository=build_repository(id_generator))
    return AppContainer(
        repository=load_repository(store, id_generator), snapshot_store=store
    )

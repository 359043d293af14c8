"""Package for repository implementations."""

from .entity_repository import EntityRepository
from .errors import RepositoryError, SnapshotFormatError
from .repository import Repository
from .snapshot import SnapshotMapper

__all__ = [
    "EntityRepository",
    "Repository",
    "RepositoryError",
    "SnapshotFormatError",
    "SnapshotMapper",
]

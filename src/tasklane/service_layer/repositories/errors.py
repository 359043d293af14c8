"""Repository-related error definitions."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class SnapshotFormatError(RepositoryError):
    """Raised when a snapshot record cannot be turned back into entities."""

    collection: str
    entity_id: str | None

    def __init__(self, collection: str, entity_id: str | None, reason: str) -> None:
        where = f"{collection}[{entity_id!r}]" if entity_id is not None else collection
        super().__init__(f"Malformed snapshot at {where}: {reason}")
        self.collection = collection
        self.entity_id = entity_id
        self.reason = reason

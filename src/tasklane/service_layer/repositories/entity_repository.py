"""Module for the generic keyed entity repository."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from tasklane.domain.entities import Entity  # pylint: disable=unused-import
from tasklane.domain.events import Observable

logger = logging.getLogger(__name__)

# ============================================================================
#                      Generic Keyed Entity Repository
# ============================================================================


T = TypeVar("T", bound="Entity")

INSERTED = "inserted"
REMOVED = "removed"


class EntityRepository(Observable, Generic[T]):
    """In-memory store of entities of one kind, keyed by their id.

    The repository announces its own lifecycle events, ``inserted.<tag>`` and
    ``removed.<tag>``, where the tag tells repositories sharing one parent bus
    apart. Changes inside the stored entities are not forwarded.

    Args:
        event_tag: Suffix of the lifecycle event names.

    Note:
        Absence is never an error: looking up or removing an unknown id
        returns None or False.
    """

    def __init__(self, event_tag: str = "entity") -> None:
        super().__init__()
        self._event_tag = event_tag
        self._entities: dict[str, T] = {}

    @property
    def event_tag(self) -> str:
        """Suffix of the lifecycle event names."""
        return self._event_tag

    # --- Reads ---

    def get(self, entity_id: str) -> T | None:
        """Get an entity by its ID, or None if there is none."""
        return self._entities.get(entity_id)

    def get_all(self) -> list[T]:
        """Get a new list of all entities."""
        return list(self._entities.values())

    def ids(self) -> list[str]:
        """Get a new list of all entity ids."""
        return list(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    # --- Writes ---

    def insert(self, entity: T) -> EntityRepository[T]:
        """Insert an entity, replacing any entity stored under the same id.

        Emits ``inserted.<tag>`` with the entity, also when replacing.
        """
        replaced = entity.id in self._entities
        self._entities[entity.id] = entity
        logger.debug(
            "%s %s %s", "Replaced" if replaced else "Inserted", self._event_tag, entity.id
        )
        self._events.trigger(f"{INSERTED}.{self._event_tag}", {"entity": entity})
        return self

    def remove(self, entity: T | str) -> bool:
        """Remove an entity, given either the entity or its id.

        Emits ``removed.<tag>`` with the argument as given and the id.

        Returns:
            True if an entity was removed, False if there was none with that id.
        """
        entity_id = entity if isinstance(entity, str) else entity.id
        if entity_id not in self._entities:
            return False

        del self._entities[entity_id]
        logger.debug("Removed %s %s", self._event_tag, entity_id)
        self._events.trigger(
            f"{REMOVED}.{self._event_tag}", {"entity": entity, "id": entity_id}
        )
        return True

    def clear(self) -> None:
        """Remove every entity, emitting one ``removed.<tag>`` per entity."""
        for entity in self.get_all():
            self.remove(entity)

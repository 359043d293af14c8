"""Identity provider for entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tasklane.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class IdentityProvider:
    """Assigns identifiers to entities at creation.

    Args:
        generator: Source of fresh identifiers.

    Note:
        No uniqueness check is performed here; a repository keeps one entity
        per identifier by overwriting on insert.
    """

    def __init__(self, generator: IdGenerator) -> None:
        self._generator = generator

    def new(self, entity_id: str | None = None) -> str:
        """Return `entity_id` unchanged if given, otherwise a fresh identifier.

        An empty string counts as not given.
        """
        if entity_id:
            return entity_id
        return self._generator.new_id()

"""Base class for all entities."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar, TypeVar

from tasklane.domain.events import Observable
from tasklane.domain.parts import Content, StatusManager, TagsList

E = TypeVar("E", bound="Entity")


class Entity(Observable):
    """Generic base class for all entities.

    An entity is identified by an immutable id and composed of independent
    parts: a `Content` (title and description), a `TagsList` and a
    `StatusManager`. Every part bubbles its events into the entity's own bus,
    so observers subscribe once on the entity to see all of its changes.

    Args:
        entity_id: The identifier of the entity.
        title: Initial title.
        description: Initial description (markdown allowed).
        tags: Initial tags.
        available_statuses: Initial available statuses; defaults to the
            status manager's defaults.

    Note:
        Initial values are set before the parts are wired, so constructing an
        entity emits nothing.
    """

    KIND: ClassVar[str]
    """A string identifier of the kind of entity, e.g. ``"task"``.

    Concrete entities must set this; repositories use it to tag their events.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        entity_id: str,
        *,
        title: str = "",
        description: str = "",
        tags: Iterable[str] | None = None,
        available_statuses: Iterable[str] | None = None,
    ) -> None:
        super().__init__()
        self._id = entity_id
        self._content = Content(title, description)
        self._tags = TagsList(tags)
        self._status_manager = StatusManager(available_statuses)

        # make sure all the changes of the parts bubble to the entity's bus
        for part in (self._content, self._tags, self._status_manager):
            part.bubble_to(self._events)

    @property
    def id(self) -> str:
        """The identifier of the entity."""
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, title={self.title!r})"

    # --- Content ---

    @property
    def title(self) -> str:
        """The title of the entity."""
        return self._content.title

    @property
    def description(self) -> str:
        """The description of the entity."""
        return self._content.description

    def set_title(self: E, title: str) -> E:
        """Set the title of the entity."""
        self._content.set_title(title)
        return self

    def set_description(self: E, description: str) -> E:
        """Set the description of the entity."""
        self._content.set_description(description)
        return self

    # --- Tags ---

    @property
    def tags(self) -> tuple[str, ...]:
        """A copy of the tags of the entity."""
        return self._tags.tags

    def get_tags(self) -> TagsList:
        """Get the tags list itself."""
        return self._tags

    def add_tag(self: E, tag: str | Iterable[str]) -> E:
        """Add a tag or several tags."""
        self._tags.add_tag(tag)
        return self

    def remove_tag(self: E, tag: str | Iterable[str]) -> E:
        """Remove a tag or several tags."""
        self._tags.remove_tag(tag)
        return self

    def contains_tag(self, tag: str | Iterable[str]) -> bool:
        """Does the entity hold the tag, or every one of the tags?"""
        return self._tags.contains_tag(tag)

    # --- Status ---

    @property
    def status(self) -> str:
        """The current status of the entity."""
        return self._status_manager.status

    @property
    def available_statuses(self) -> tuple[str, ...]:
        """A copy of the available statuses of the entity."""
        return self._status_manager.available_statuses

    @property
    def is_orphaned(self) -> bool:
        """True if the current status is no longer one of the available statuses."""
        return self._status_manager.is_orphaned

    def get_status_manager(self) -> StatusManager:
        """Get the status manager itself."""
        return self._status_manager

    def set_status(self: E, status: str) -> E:
        """Set the current status.

        Raises:
            InvalidStatusError: If the status is not one of the available statuses.
        """
        self._status_manager.set_status(status)
        return self

    def set_available_statuses(self: E, statuses: Iterable[str] | None) -> E:
        """Set the available statuses.

        Raises:
            EmptyStatusesError: If `statuses` is missing, empty, or only blank.
        """
        self._status_manager.set_available_statuses(statuses)
        return self

    def increase_status(self: E) -> E:
        """Move to the next status.

        Raises:
            InvalidStatusError: If the current status is not one of the available statuses.
        """
        self._status_manager.increase_status()
        return self

    def decrease_status(self: E) -> E:
        """Move to the previous status.

        Raises:
            InvalidStatusError: If the current status is not one of the available statuses.
        """
        self._status_manager.decrease_status()
        return self

"""Title and free-text body of an entity."""

from __future__ import annotations

from tasklane.domain.events import Observable

CONTENT_CHANGED = "changed.content"


class Content(Observable):
    """Holds the title and the (markdown) description of an item."""

    def __init__(self, title: str = "", description: str = "") -> None:
        super().__init__()
        self._title = title
        self._description = description

    @property
    def title(self) -> str:
        """The title."""
        return self._title

    @property
    def description(self) -> str:
        """The description, possibly in markdown."""
        return self._description

    def set_title(self, title: str) -> Content:
        """Set a new title."""
        self._title = title
        self._events.trigger(CONTENT_CHANGED, {"title": title})
        return self

    def set_description(self, description: str) -> Content:
        """Set a new description."""
        self._description = description
        self._events.trigger(CONTENT_CHANGED, {"description": description})
        return self

"""Normalized tag set."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tasklane.domain.events import Observable
from tasklane.domain.utils import normalize_label

logger = logging.getLogger(__name__)

TAGS_CHANGED = "changed.tags"


class TagsList(Observable):
    """A duplicate-free collection of normalized tags.

    Tags are stored in their normalized form (see `normalize_label`) and keep
    the order in which they were first added. Each call to `add_tag` or
    `remove_tag` emits exactly one ``changed.tags`` event carrying the full
    resulting list, whether or not the call changed anything.

    Args:
        tags: Initial tags. No event is emitted for them.
    """

    def __init__(self, tags: str | Iterable[str] | None = None) -> None:
        super().__init__()
        # dict keeps insertion order, unlike set
        self._tags: dict[str, None] = {}
        if tags is not None:
            self._tags.update(dict.fromkeys(self._normalized(tags)))

    @property
    def tags(self) -> tuple[str, ...]:
        """A copy of the current tags."""
        return tuple(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self):
        return iter(self.tags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._tags)!r})"

    def add_tag(self, tag: str | Iterable[str]) -> TagsList:
        """Add a tag or several tags."""
        for normalized in self._normalized(tag):
            self._tags[normalized] = None
        logger.debug("Tags after add: %s", list(self._tags))
        self._events.trigger(TAGS_CHANGED, {"tags": list(self._tags)})
        return self

    def remove_tag(self, tag: str | Iterable[str]) -> TagsList:
        """Remove a tag or several tags. Absent tags are ignored."""
        for normalized in self._normalized(tag):
            self._tags.pop(normalized, None)
        logger.debug("Tags after remove: %s", list(self._tags))
        self._events.trigger(TAGS_CHANGED, {"tags": list(self._tags)})
        return self

    def contains_tag(self, tag: str | Iterable[str]) -> bool:
        """Does the list contain the tag, or every one of the tags?

        An empty list contains nothing, not even an empty selection of tags,
        whereas a non-empty list contains every tag of an empty selection.
        """
        if not self._tags:
            return False
        return all(normalized in self._tags for normalized in self._normalized(tag))

    @staticmethod
    def _normalized(tag: str | Iterable[str]) -> list[str]:
        if isinstance(tag, str):
            return [normalize_label(tag)]
        return [normalize_label(t) for t in tag]

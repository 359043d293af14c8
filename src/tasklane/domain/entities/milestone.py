"""Milestone entity."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .base import Entity

TIMELINE_CHANGED = "changed.timeline"
RELATIONS_CHANGED = "changed.relations"


class Milestone(Entity):
    """A milestone on a timeline, possibly depending on other milestones.

    `requirements` holds the ids of milestones that must be reached before
    this one can start; they are not checked against any repository.
    """

    KIND = "milestone"

    def __init__(  # pylint: disable=too-many-arguments
        self,
        entity_id: str,
        *,
        title: str = "",
        description: str = "",
        tags: Iterable[str] | None = None,
        available_statuses: Iterable[str] | None = None,
        start_date: datetime | None = None,
        due_date: datetime | None = None,
        requirements: Iterable[str] = (),
    ) -> None:
        super().__init__(
            entity_id,
            title=title,
            description=description,
            tags=tags,
            available_statuses=available_statuses,
        )
        self._start_date = start_date
        self._due_date = due_date
        self._requirements = list(dict.fromkeys(requirements))

    @property
    def start_date(self) -> datetime | None:
        """When work towards the milestone starts, if known."""
        return self._start_date

    @property
    def due_date(self) -> datetime | None:
        """When the milestone is due, if ever."""
        return self._due_date

    def set_start_date(self, start_date: datetime | None) -> Milestone:
        """Set (or clear, with None) the start date."""
        self._start_date = start_date
        self._events.trigger(TIMELINE_CHANGED, {"start_date": start_date})
        return self

    def set_due_date(self, due_date: datetime | None) -> Milestone:
        """Set (or clear, with None) the due date."""
        self._due_date = due_date
        self._events.trigger(TIMELINE_CHANGED, {"due_date": due_date})
        return self

    @property
    def requirements(self) -> tuple[str, ...]:
        """Ids of the milestones required before this one."""
        return tuple(self._requirements)

    def add_requirement(self, milestone_id: str) -> Milestone:
        """Require another milestone before this one."""
        if milestone_id not in self._requirements:
            self._requirements.append(milestone_id)
        self._events.trigger(
            RELATIONS_CHANGED, {"requirements": list(self._requirements)}
        )
        return self

    def remove_requirement(self, milestone_id: str) -> Milestone:
        """Drop a requirement; unknown ids are ignored."""
        if milestone_id in self._requirements:
            self._requirements.remove(milestone_id)
        self._events.trigger(
            RELATIONS_CHANGED, {"requirements": list(self._requirements)}
        )
        return self

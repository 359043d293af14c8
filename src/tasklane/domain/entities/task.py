"""Task entity."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from tasklane.domain.value_objects import Counter

from .base import Entity

# pylint: disable=too-many-arguments

TIMELINE_CHANGED = "changed.timeline"
COUNTER_CHANGED = "changed.counter"
RELATIONS_CHANGED = "changed.relations"


class Task(Entity):
    """A task: a titled piece of work that progresses through statuses.

    Besides the content, tags and status shared by all entities, a task has a
    timeline (creation and due date), an optional `Counter` of sub-items, and
    the ids of the projects and milestones it is attached to. Those ids are
    plain strings; nothing checks that the referenced entities exist.
    """

    KIND = "task"

    def __init__(
        self,
        entity_id: str,
        *,
        title: str = "",
        description: str = "",
        tags: Iterable[str] | None = None,
        available_statuses: Iterable[str] | None = None,
        creation_date: datetime | None = None,
        due_date: datetime | None = None,
        counter: Counter | None = None,
        projects: Iterable[str] = (),
        milestones: Iterable[str] = (),
    ) -> None:
        super().__init__(
            entity_id,
            title=title,
            description=description,
            tags=tags,
            available_statuses=available_statuses,
        )
        self._creation_date = (
            creation_date if creation_date is not None else datetime.now(timezone.utc)
        )
        self._due_date = due_date
        self._counter = counter
        self._projects = list(dict.fromkeys(projects))
        self._milestones = list(dict.fromkeys(milestones))

    # --- Timeline ---

    @property
    def creation_date(self) -> datetime:
        """When the task was created."""
        return self._creation_date

    @property
    def due_date(self) -> datetime | None:
        """When the task is due, if ever."""
        return self._due_date

    def set_creation_date(self, creation_date: datetime) -> Task:
        """Set the creation date of the task."""
        self._creation_date = creation_date
        self._events.trigger(TIMELINE_CHANGED, {"creation_date": creation_date})
        return self

    def set_due_date(self, due_date: datetime | None) -> Task:
        """Set (or clear, with None) the due date of the task."""
        self._due_date = due_date
        self._events.trigger(TIMELINE_CHANGED, {"due_date": due_date})
        return self

    # --- Counter ---

    @property
    def counter(self) -> Counter | None:
        """How many sub-items of the task are in each state, if tracked."""
        return self._counter

    def set_counter(self, counter: Counter | None) -> Task:
        """Set (or clear, with None) the counter of the task."""
        self._counter = counter
        self._events.trigger(COUNTER_CHANGED, {"counter": counter})
        return self

    # --- Relations ---

    @property
    def projects(self) -> tuple[str, ...]:
        """Ids of the projects the task is attached to."""
        return tuple(self._projects)

    @property
    def milestones(self) -> tuple[str, ...]:
        """Ids of the milestones the task is attached to."""
        return tuple(self._milestones)

    def attach_project(self, project_id: str) -> Task:
        """Attach the task to a project."""
        if project_id not in self._projects:
            self._projects.append(project_id)
        self._events.trigger(RELATIONS_CHANGED, {"projects": list(self._projects)})
        return self

    def detach_project(self, project_id: str) -> Task:
        """Detach the task from a project; unknown ids are ignored."""
        if project_id in self._projects:
            self._projects.remove(project_id)
        self._events.trigger(RELATIONS_CHANGED, {"projects": list(self._projects)})
        return self

    def attach_milestone(self, milestone_id: str) -> Task:
        """Attach the task to a milestone."""
        if milestone_id not in self._milestones:
            self._milestones.append(milestone_id)
        self._events.trigger(RELATIONS_CHANGED, {"milestones": list(self._milestones)})
        return self

    def detach_milestone(self, milestone_id: str) -> Task:
        """Detach the task from a milestone; unknown ids are ignored."""
        if milestone_id in self._milestones:
            self._milestones.remove(milestone_id)
        self._events.trigger(RELATIONS_CHANGED, {"milestones": list(self._milestones)})
        return self

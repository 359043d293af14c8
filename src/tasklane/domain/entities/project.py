"""Project entity."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from tasklane.domain.parts.status import DEFAULT_STATUSES, validate_statuses

from .base import Entity

TIMELINE_CHANGED = "changed.timeline"
TASK_STATUSES_CHANGED = "changed.task_statuses"


class Project(Entity):
    """A project groups tasks.

    Tags of a project are meant to be copied onto tasks created for it, and
    its `task_statuses` become the available statuses of those tasks.
    """

    KIND = "project"

    def __init__(  # pylint: disable=too-many-arguments
        self,
        entity_id: str,
        *,
        title: str = "",
        description: str = "",
        tags: Iterable[str] | None = None,
        available_statuses: Iterable[str] | None = None,
        due_date: datetime | None = None,
        task_statuses: Iterable[str] | None = None,
    ) -> None:
        super().__init__(
            entity_id,
            title=title,
            description=description,
            tags=tags,
            available_statuses=available_statuses,
        )
        self._due_date = due_date
        self._task_statuses = (
            validate_statuses(task_statuses)
            if task_statuses is not None
            else DEFAULT_STATUSES
        )

    @property
    def due_date(self) -> datetime | None:
        """When the project is due, if ever."""
        return self._due_date

    def set_due_date(self, due_date: datetime | None) -> Project:
        """Set (or clear, with None) the due date of the project."""
        self._due_date = due_date
        self._events.trigger(TIMELINE_CHANGED, {"due_date": due_date})
        return self

    @property
    def task_statuses(self) -> tuple[str, ...]:
        """The statuses handed to tasks of this project, in progression order."""
        return tuple(self._task_statuses)

    def set_task_statuses(self, statuses: Iterable[str] | None) -> Project:
        """Replace the statuses handed to tasks of this project.

        Tasks already created keep their own available statuses.

        Raises:
            EmptyStatusesError: If `statuses` is missing, empty, or only blank.
        """
        self._task_statuses = validate_statuses(statuses)
        self._events.trigger(
            TASK_STATUSES_CHANGED, {"task_statuses": list(self._task_statuses)}
        )
        return self

"""Conversions between entities and snapshot records.

A snapshot is a plain, JSON-compatible mapping with three collections::

    {
        "tasks": {task_id: {...}},
        "projects": {project_id: {...}},
        "milestones": {milestone_id: {...}},
    }

Each record mirrors the public fields of its entity; dates are ISO-8601
strings or None. Entities rebuilt from records keep their ids.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from tasklane.domain.entities import Entity, Milestone, Project, Task
from tasklane.domain.errors import InvalidInputError
from tasklane.domain.value_objects import Counter
from tasklane.utils.dates import format_iso_datetime, parse_iso_datetime
from tasklane.utils.records import dict_to_dataclass

from .errors import SnapshotFormatError

# pylint: disable=too-many-instance-attributes

TASKS = "tasks"
PROJECTS = "projects"
MILESTONES = "milestones"
COLLECTIONS = (TASKS, PROJECTS, MILESTONES)

_BAD_VALUES = (TypeError, AttributeError, InvalidInputError)

E = TypeVar("E", bound=Entity)
R = TypeVar("R")


# ============================================================================
#                               Records
# ============================================================================


@dataclass(frozen=True, slots=True)
class CounterRecord:
    """Snapshot record of a `Counter`."""

    states: dict[str, int] = field(default_factory=dict)
    total: int = 0


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """Snapshot record of a `Task`."""

    title: str
    description: str = ""
    date: str | None = None
    duedate: str | None = None
    tags: list[str] = field(default_factory=list)
    status: str | None = None
    statuses: list[str] | None = None
    counter: CounterRecord | None = None
    projects: list[str] = field(default_factory=list)
    milestones: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProjectRecord:
    """Snapshot record of a `Project`."""

    title: str
    description: str = ""
    duedate: str | None = None
    tags: list[str] = field(default_factory=list)
    status: str | None = None
    statuses: list[str] | None = None
    task_statuses: list[str] | None = None


@dataclass(frozen=True, slots=True)
class MilestoneRecord:
    """Snapshot record of a `Milestone`."""

    title: str
    description: str = ""
    startdate: str | None = None
    duedate: str | None = None
    tags: list[str] = field(default_factory=list)
    status: str | None = None
    statuses: list[str] | None = None
    requirements: list[str] = field(default_factory=list)


# ============================================================================
#                               Mapper
# ============================================================================


class SnapshotMapper:
    """Maps between entities and snapshot records."""

    # --- Entity -> record ---

    @staticmethod
    def task_to_record(task: Task) -> dict[str, Any]:
        """Convert a task to a plain record."""
        counter = task.counter
        record = TaskRecord(
            title=task.title,
            description=task.description,
            date=format_iso_datetime(task.creation_date),
            duedate=format_iso_datetime(task.due_date),
            tags=list(task.tags),
            status=task.status,
            statuses=list(task.available_statuses),
            counter=(
                CounterRecord(states=dict(counter.states), total=counter.total)
                if counter is not None
                else None
            ),
            projects=list(task.projects),
            milestones=list(task.milestones),
        )
        return asdict(record)

    @staticmethod
    def project_to_record(project: Project) -> dict[str, Any]:
        """Convert a project to a plain record."""
        record = ProjectRecord(
            title=project.title,
            description=project.description,
            duedate=format_iso_datetime(project.due_date),
            tags=list(project.tags),
            status=project.status,
            statuses=list(project.available_statuses),
            task_statuses=list(project.task_statuses),
        )
        return asdict(record)

    @staticmethod
    def milestone_to_record(milestone: Milestone) -> dict[str, Any]:
        """Convert a milestone to a plain record."""
        record = MilestoneRecord(
            title=milestone.title,
            description=milestone.description,
            startdate=format_iso_datetime(milestone.start_date),
            duedate=format_iso_datetime(milestone.due_date),
            tags=list(milestone.tags),
            status=milestone.status,
            statuses=list(milestone.available_statuses),
            requirements=list(milestone.requirements),
        )
        return asdict(record)

    # --- Record -> entity ---

    def task_from_record(self, task_id: str, values: Any) -> Task:
        """Rebuild a task from its record.

        Raises:
            SnapshotFormatError: If the record is malformed.
        """
        record = self._load(TaskRecord, TASKS, task_id, values)
        try:
            counter = (
                Counter(record.counter.states, record.counter.total)
                if record.counter is not None
                else None
            )
            task = Task(
                task_id,
                title=record.title,
                description=record.description,
                tags=record.tags,
                creation_date=self._date(TASKS, task_id, record.date),
                due_date=self._date(TASKS, task_id, record.duedate),
                counter=counter,
                projects=record.projects,
                milestones=record.milestones,
            )
        except _BAD_VALUES as e:
            raise SnapshotFormatError(TASKS, task_id, str(e)) from e
        return self._restore_status(task, TASKS, record.status, record.statuses)

    def project_from_record(self, project_id: str, values: Any) -> Project:
        """Rebuild a project from its record.

        Raises:
            SnapshotFormatError: If the record is malformed.
        """
        record = self._load(ProjectRecord, PROJECTS, project_id, values)
        try:
            project = Project(
                project_id,
                title=record.title,
                description=record.description,
                tags=record.tags,
                due_date=self._date(PROJECTS, project_id, record.duedate),
                task_statuses=record.task_statuses,
            )
        except _BAD_VALUES as e:
            raise SnapshotFormatError(PROJECTS, project_id, str(e)) from e
        return self._restore_status(project, PROJECTS, record.status, record.statuses)

    def milestone_from_record(self, milestone_id: str, values: Any) -> Milestone:
        """Rebuild a milestone from its record.

        Raises:
            SnapshotFormatError: If the record is malformed.
        """
        record = self._load(MilestoneRecord, MILESTONES, milestone_id, values)
        try:
            milestone = Milestone(
                milestone_id,
                title=record.title,
                description=record.description,
                tags=record.tags,
                start_date=self._date(MILESTONES, milestone_id, record.startdate),
                due_date=self._date(MILESTONES, milestone_id, record.duedate),
                requirements=record.requirements,
            )
        except _BAD_VALUES as e:
            raise SnapshotFormatError(MILESTONES, milestone_id, str(e)) from e
        return self._restore_status(
            milestone, MILESTONES, record.status, record.statuses
        )

    # --- Whole snapshot ---

    @staticmethod
    def collection(snapshot: Any, name: str) -> Mapping[str, Any]:
        """Return one collection of a snapshot; a missing one is empty.

        Raises:
            SnapshotFormatError: If the snapshot or the collection is not a mapping.
        """
        if not isinstance(snapshot, Mapping):
            raise SnapshotFormatError("snapshot", None, "expected a mapping")
        values = snapshot.get(name)
        if values is None:
            return {}
        if not isinstance(values, Mapping):
            raise SnapshotFormatError(name, None, "expected a mapping of id to record")
        return values

    # --- Internal Helpers ---

    @staticmethod
    def _load(
        record_type: type[R], collection: str, entity_id: str, values: Any
    ) -> R:
        if not isinstance(values, Mapping):
            raise SnapshotFormatError(collection, entity_id, "expected a mapping")
        try:
            record = dict_to_dataclass(record_type, values)
        except KeyError as e:
            raise SnapshotFormatError(collection, entity_id, str(e.args[0])) from e
        SnapshotMapper._check_lists(record, collection, entity_id)
        return record

    @staticmethod
    def _check_lists(record: Any, collection: str, entity_id: str) -> None:
        # strings are iterable too and would be split into characters
        hints = get_type_hints(type(record))
        for f in fields(record):
            hint = hints[f.name]
            if not any(get_origin(h) is list for h in (hint, *get_args(hint))):
                continue
            value = getattr(record, f.name)
            if value is None:
                continue
            if not isinstance(value, list) or not all(
                isinstance(item, str) for item in value
            ):
                raise SnapshotFormatError(
                    collection,
                    entity_id,
                    f"expected a list of strings for {f.name!r}, got {value!r}",
                )

    @staticmethod
    def _date(collection: str, entity_id: str, value: Any) -> datetime | None:
        if value is not None and not isinstance(value, str):
            raise SnapshotFormatError(
                collection, entity_id, f"expected an ISO-8601 string, got {value!r}"
            )
        try:
            return parse_iso_datetime(value)
        except ValueError as e:
            raise SnapshotFormatError(collection, entity_id, str(e)) from e

    @staticmethod
    def _restore_status(entity: E, collection: str, status: Any, statuses: Any) -> E:
        if status is not None and not isinstance(status, str):
            raise SnapshotFormatError(
                collection, entity.id, f"expected a status string, got {status!r}"
            )
        try:
            entity.get_status_manager().restore(status, statuses)
        except _BAD_VALUES as e:
            raise SnapshotFormatError(collection, entity.id, str(e)) from e
        return entity

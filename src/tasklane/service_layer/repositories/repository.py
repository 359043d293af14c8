"""The aggregate repository: tasks, projects and milestones in one place."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from tasklane.domain.entities import Milestone, Project, Task
from tasklane.domain.events import Observable
from tasklane.domain.identity import IdentityProvider
from tasklane.domain.value_objects import Counter

from .entity_repository import EntityRepository
from .snapshot import MILESTONES, PROJECTS, TASKS, SnapshotMapper

# pylint: disable=too-many-arguments,too-many-public-methods

logger = logging.getLogger(__name__)


class Repository(Observable):
    """Outward-facing store of the task-tracking model.

    Composes one `EntityRepository` per kind of entity. Their lifecycle events
    (``inserted.task``, ``removed.project``, ...) bubble into this repository's
    own bus, so a single subscription here observes them all.

    Args:
        identity: Assigns ids to entities created through the ``create_*``
            methods.
        mapper: Converts entities to and from snapshot records.
    """

    def __init__(
        self, identity: IdentityProvider, mapper: SnapshotMapper | None = None
    ) -> None:
        super().__init__()
        self.identity = identity
        self.mapper = mapper if mapper is not None else SnapshotMapper()
        self.tasks: EntityRepository[Task] = EntityRepository(Task.KIND)
        self.projects: EntityRepository[Project] = EntityRepository(Project.KIND)
        self.milestones: EntityRepository[Milestone] = EntityRepository(Milestone.KIND)
        for repository in (self.tasks, self.projects, self.milestones):
            repository.bubble_to(self._events)

    # --- Tasks ---

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by its ID, or None."""
        return self.tasks.get(task_id)

    def get_all_tasks(self) -> list[Task]:
        """Get all tasks."""
        return self.tasks.get_all()

    def create_task(
        self,
        title: str,
        *,
        description: str = "",
        creation_date: datetime | None = None,
        due_date: datetime | None = None,
        tags: Iterable[str] = (),
        status: str | None = None,
        counter: Counter | None = None,
        projects: Iterable[str] = (),
        milestones: Iterable[str] = (),
        task_id: str | None = None,
    ) -> Task:
        """Create a new task and add it to the repository.

        Tasks created for existing projects inherit their tags, and the task
        statuses of the first such project become the task's available
        statuses.

        Raises:
            InvalidStatusError: If `status` is not one of the task's available
                statuses. Nothing is added in that case.
        """
        projects = list(projects)
        parents = [p for p in map(self.projects.get, projects) if p is not None]

        task = Task(
            self.identity.new(task_id),
            title=title,
            description=description,
            tags=[*tags, *(tag for project in parents for tag in project.tags)],
            available_statuses=parents[0].task_statuses if parents else None,
            creation_date=creation_date,
            due_date=due_date,
            counter=counter,
            projects=projects,
            milestones=milestones,
        )
        if status is not None:
            task.set_status(status)
        self.tasks.insert(task)
        return task

    def emplace_task(self, task: Task) -> None:
        """Insert or replace a task."""
        self.tasks.insert(task)

    def delete_task(self, task_id: str) -> bool:
        """Delete a task by ID; returns False if there was none."""
        return self.tasks.remove(task_id)

    # --- Projects ---

    def get_project(self, project_id: str) -> Project | None:
        """Get a project by its ID, or None."""
        return self.projects.get(project_id)

    def get_all_projects(self) -> list[Project]:
        """Get all projects."""
        return self.projects.get_all()

    def create_project(
        self,
        title: str,
        *,
        description: str = "",
        due_date: datetime | None = None,
        tags: Iterable[str] = (),
        task_statuses: Iterable[str] | None = None,
        project_id: str | None = None,
    ) -> Project:
        """Create a new project and add it to the repository.

        Raises:
            EmptyStatusesError: If `task_statuses` is given but empty.
        """
        project = Project(
            self.identity.new(project_id),
            title=title,
            description=description,
            tags=tags,
            due_date=due_date,
            task_statuses=task_statuses,
        )
        self.projects.insert(project)
        return project

    def emplace_project(self, project: Project) -> None:
        """Insert or replace a project."""
        self.projects.insert(project)

    def delete_project(self, project_id: str) -> bool:
        """Delete a project by ID; returns False if there was none.

        Tasks attached to the project keep its id.
        """
        return self.projects.remove(project_id)

    # --- Milestones ---

    def get_milestone(self, milestone_id: str) -> Milestone | None:
        """Get a milestone by its ID, or None."""
        return self.milestones.get(milestone_id)

    def get_all_milestones(self) -> list[Milestone]:
        """Get all milestones."""
        return self.milestones.get_all()

    def create_milestone(
        self,
        title: str,
        *,
        description: str = "",
        tags: Iterable[str] = (),
        start_date: datetime | None = None,
        due_date: datetime | None = None,
        requirements: Iterable[str] = (),
        milestone_id: str | None = None,
    ) -> Milestone:
        """Create a new milestone and add it to the repository."""
        milestone = Milestone(
            self.identity.new(milestone_id),
            title=title,
            description=description,
            tags=tags,
            start_date=start_date,
            due_date=due_date,
            requirements=requirements,
        )
        self.milestones.insert(milestone)
        return milestone

    def emplace_milestone(self, milestone: Milestone) -> None:
        """Insert or replace a milestone."""
        self.milestones.insert(milestone)

    def delete_milestone(self, milestone_id: str) -> bool:
        """Delete a milestone by ID; returns False if there was none."""
        return self.milestones.remove(milestone_id)

    # --- Snapshots ---

    def clear(self) -> None:
        """Remove every entity, emitting a ``removed`` event for each."""
        self.tasks.clear()
        self.projects.clear()
        self.milestones.clear()

    def to_snapshot(self) -> dict[str, Any]:
        """Export all entities as a plain, JSON-compatible record."""
        return {
            TASKS: {t.id: self.mapper.task_to_record(t) for t in self.tasks},
            PROJECTS: {p.id: self.mapper.project_to_record(p) for p in self.projects},
            MILESTONES: {
                m.id: self.mapper.milestone_to_record(m) for m in self.milestones
            },
        }

    def load_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        """Replace all entities with those of a snapshot.

        The snapshot is fully decoded before anything is replaced, so a
        malformed snapshot leaves the repository untouched.

        Raises:
            SnapshotFormatError: If the snapshot is malformed.
        """
        mapper = self.mapper
        tasks = [
            mapper.task_from_record(str(task_id), record)
            for task_id, record in mapper.collection(snapshot, TASKS).items()
        ]
        projects = [
            mapper.project_from_record(str(project_id), record)
            for project_id, record in mapper.collection(snapshot, PROJECTS).items()
        ]
        milestones = [
            mapper.milestone_from_record(str(milestone_id), record)
            for milestone_id, record in mapper.collection(snapshot, MILESTONES).items()
        ]

        self.clear()
        for task in tasks:
            self.tasks.insert(task)
        for project in projects:
            self.projects.insert(project)
        for milestone in milestones:
            self.milestones.insert(milestone)
        logger.info(
            "Loaded snapshot: %d tasks, %d projects, %d milestones",
            len(tasks),
            len(projects),
            len(milestones),
        )

    @classmethod
    def from_snapshot(
        cls, snapshot: Mapping[str, Any], identity: IdentityProvider
    ) -> Repository:
        """Create a new repository holding the entities of a snapshot.

        Raises:
            SnapshotFormatError: If the snapshot is malformed.
        """
        repository = cls(identity)
        repository.load_snapshot(snapshot)
        return repository

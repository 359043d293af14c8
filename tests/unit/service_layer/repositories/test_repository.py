"""Test the aggregate Repository of tasks, projects and milestones."""

from datetime import datetime, timezone

import pytest

from tasklane.domain.entities import Milestone, Project, Task
from tasklane.domain.errors import EmptyStatusesError, InvalidStatusError
from tasklane.domain.value_objects import Counter

# pylint: disable=magic-value-comparison


class TestTasks:
    """Tests for creating and managing tasks."""

    @staticmethod
    def test_create_task_assigns_an_id_and_stores_it(repository, recorder):
        """Created tasks get a generated id and are announced."""
        recorder.listen(repository, "inserted")

        task = repository.create_task("Write docs", tags=["Docs"])

        assert task.id == "0001"
        assert repository.get_task("0001") is task
        assert task.title == "Write docs"
        assert task.tags == ("docs",)
        assert task.status == "pending"
        assert recorder.names == ["inserted.task"]

    @staticmethod
    def test_create_task_with_explicit_id(repository):
        """An explicit id is used as is."""
        task = repository.create_task("T", task_id="custom")
        assert task.id == "custom"
        assert repository.get_all_tasks() == [task]

    @staticmethod
    def test_create_task_with_all_fields(repository):
        """Every optional field ends up on the task."""
        due = datetime(2031, 5, 1, tzinfo=timezone.utc)
        counter = Counter({"done": 1}, total=3)

        task = repository.create_task(
            "T",
            description="body",
            due_date=due,
            status="in progress",
            counter=counter,
            milestones=["m1"],
        )

        assert task.description == "body"
        assert task.due_date == due
        assert task.status == "in progress"
        assert task.counter == counter
        assert task.milestones == ("m1",)

    @staticmethod
    def test_invalid_status_inserts_nothing(repository, recorder):
        """A status the task cannot take aborts the creation."""
        recorder.listen(repository, "inserted")
        with pytest.raises(InvalidStatusError):
            repository.create_task("T", status="archived")
        assert repository.get_all_tasks() == []
        assert recorder.events == []

    @staticmethod
    def test_emplace_and_delete(repository, recorder):
        """Tasks built elsewhere can be inserted and deleted by id."""
        recorder.listen(repository, "removed")
        task = Task("t1")
        repository.emplace_task(task)

        assert repository.delete_task("t1") is True
        assert repository.delete_task("t1") is False
        assert recorder.names == ["removed.task"]


class TestProjectInheritance:
    """Tests for tasks created within projects."""

    @staticmethod
    def test_task_inherits_tags_and_statuses_of_its_project(repository):
        """Project tags are added and project task statuses become available."""
        project = repository.create_project(
            "Site", tags=["web"], task_statuses=["todo", "review", "live"]
        )

        task = repository.create_task("Page", tags=["Copy"], projects=[project.id])

        assert task.projects == (project.id,)
        assert task.tags == ("copy", "web")
        assert task.available_statuses == ("todo", "review", "live")
        assert task.status == "todo"

    @staticmethod
    def test_first_project_decides_the_statuses(repository):
        """With several projects, tags merge and the first one's statuses win."""
        first = repository.create_project("A", tags=["a"], task_statuses=["x", "y"])
        second = repository.create_project("B", tags=["b"], task_statuses=["z"])

        task = repository.create_task("T", projects=[first.id, second.id])

        assert task.tags == ("a", "b")
        assert task.available_statuses == ("x", "y")

    @staticmethod
    def test_unknown_projects_are_kept_but_contribute_nothing(repository):
        """References to missing projects are stored without inheritance."""
        task = repository.create_task("T", projects=["ghost"])
        assert task.projects == ("ghost",)
        assert task.tags == ()
        assert task.available_statuses == ("pending", "in progress", "done")

    @staticmethod
    def test_status_is_checked_against_inherited_statuses(repository):
        """The requested status must be one of the project's task statuses."""
        project = repository.create_project("P", task_statuses=["todo", "done"])
        task = repository.create_task("T", projects=[project.id], status="done")
        assert task.status == "done"
        with pytest.raises(InvalidStatusError):
            repository.create_task("T", projects=[project.id], status="pending")


class TestProjectsAndMilestones:
    """Tests for creating and managing projects and milestones."""

    @staticmethod
    def test_create_project(repository, recorder):
        """Projects are created with validated task statuses."""
        recorder.listen(repository, "inserted.project")
        project = repository.create_project("P", description="d", tags=["X"])

        assert repository.get_project(project.id) is project
        assert repository.get_all_projects() == [project]
        assert project.tags == ("x",)
        assert len(recorder.events) == 1

    @staticmethod
    def test_create_project_with_empty_statuses_fails(repository):
        """Empty task statuses are rejected and nothing is stored."""
        with pytest.raises(EmptyStatusesError):
            repository.create_project("P", task_statuses=[])
        assert repository.get_all_projects() == []

    @staticmethod
    def test_delete_project_keeps_task_references(repository):
        """Deleting a project does not touch the tasks pointing at it."""
        project = repository.create_project("P")
        task = repository.create_task("T", projects=[project.id])

        assert repository.delete_project(project.id) is True

        assert task.projects == (project.id,)
        assert repository.get_task(task.id) is task

    @staticmethod
    def test_milestones(repository, recorder):
        """Milestones are created, emplaced and deleted like the rest."""
        recorder.listen(repository, "inserted.milestone")
        start = datetime(2030, 1, 1, tzinfo=timezone.utc)
        milestone = repository.create_milestone(
            "Beta", start_date=start, requirements=["alpha"]
        )
        repository.emplace_milestone(Milestone("alpha"))

        assert milestone.start_date == start
        assert milestone.requirements == ("alpha",)
        assert {m.id for m in repository.get_all_milestones()} == {milestone.id, "alpha"}
        assert repository.get_milestone("alpha") is not None
        assert repository.delete_milestone("alpha") is True
        assert len(recorder.events) == 2

    @staticmethod
    def test_emplace_project(repository):
        """A project built elsewhere can be inserted."""
        project = Project("p1")
        repository.emplace_project(project)
        assert repository.get_project("p1") is project


class TestEvents:
    """Tests for the events observed on the repository."""

    @staticmethod
    def test_lifecycle_events_of_all_kinds_reach_the_repository(repository, recorder):
        """A single subscription sees every kind of lifecycle event."""
        recorder.listen(repository, "inserted").listen(repository, "removed")

        task = repository.create_task("T")
        project = repository.create_project("P")
        repository.delete_task(task.id)
        repository.delete_project(project.id)

        assert recorder.names == [
            "inserted.task",
            "inserted.project",
            "removed.task",
            "removed.project",
        ]

    @staticmethod
    def test_entity_changes_stay_on_the_entity(repository, recorder):
        """Changes inside entities are observed on the entities themselves."""
        task = repository.create_task("T")
        recorder.listen(repository, "changed")
        task.add_tag("x")
        assert recorder.events == []

    @staticmethod
    def test_clear_removes_everything(repository, recorder):
        """clear() empties every collection with one event per entity."""
        repository.create_task("T")
        repository.create_project("P")
        repository.create_milestone("M")
        recorder.listen(repository, "removed")

        repository.clear()

        assert repository.get_all_tasks() == []
        assert repository.get_all_projects() == []
        assert repository.get_all_milestones() == []
        assert sorted(recorder.names) == [
            "removed.milestone",
            "removed.project",
            "removed.task",
        ]

    @staticmethod
    def test_repository_collections_are_typed_by_kind(repository):
        """Each kind lives in its own entity repository."""
        assert repository.tasks.event_tag == Task.KIND
        assert repository.projects.event_tag == Project.KIND
        assert repository.milestones.event_tag == Milestone.KIND

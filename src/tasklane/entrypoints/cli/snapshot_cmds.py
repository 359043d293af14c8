"""TASKLANE snapshot commands.

Commands load the snapshot file given with ``--snapshot`` (or the
``TASKLANE_SNAPSHOT`` environment variable) into a repository, act on it,
and write it back when something changed. A command that changes nothing,
such as ``advance`` on a task already at its last status, leaves the file
untouched.

Behavior
- Tables go to **stdout**; notices go to **stderr**.
- A missing snapshot file counts as an empty repository; ``show`` prints
  empty tables and nothing is written until a command changes something.

Failure modes
- No snapshot path configured, a malformed snapshot, an unknown task id, or an
  invalid status → ``ClickException`` with guidance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from tasklane import bootstrap, config
from tasklane.domain.errors import InvalidInputError
from tasklane.logging import trace_events
from tasklane.service_layer.repositories import SnapshotFormatError

from .helpers import success, warn

if TYPE_CHECKING:
    from datetime import datetime

    from tasklane.domain.entities import Task
    from tasklane.service_layer.repositories import Repository

logger = logging.getLogger(__name__)

MISSING_SNAPSHOT_MSG = (
    f"No snapshot file given and {config.SNAPSHOT_ENV_VAR} is not set.\n\n"
    "Pass one with --snapshot, e.g.:\n"
    "  tasklane --snapshot board.json show\n"
    "or set it before running this command:\n"
    f"  export {config.SNAPSHOT_ENV_VAR}=board.json"
)

MALFORMED_SNAPSHOT_MSG = "The snapshot file {path} cannot be read: {reason}"


@contextmanager
def _open_repository(ctx: click.Context, write: bool = True) -> Iterator[Repository]:
    """Yield the repository of the configured snapshot.

    With `write`, the snapshot is saved after a successful command if it differs
    from the one loaded.
    """
    try:
        store = bootstrap.build_snapshot_store(ctx.obj.get("snapshot_path"))
    except config.SnapshotPathNotSetError as e:
        raise click.ClickException(MISSING_SNAPSHOT_MSG) from e
    try:
        container = bootstrap.bootstrap(store)
    except config.UnknownIdGeneratorError as e:
        raise click.ClickException(str(e)) from e
    except (SnapshotFormatError, ValueError) as e:
        raise click.ClickException(
            MALFORMED_SNAPSHOT_MSG.format(path=store.path, reason=e)
        ) from e

    repository = container.repository
    before = repository.to_snapshot() if write else None
    uninstall = trace_events(repository, logger) if ctx.obj.get("debug") else None
    try:
        yield repository
    finally:
        if uninstall is not None:
            uninstall()
    if not write:
        return
    if repository.to_snapshot() == before:
        logger.debug("Nothing changed; %s left as is", store.path)
        return
    container.save()
    logger.info("Saved snapshot to %s", store.path)


def _get_task(repository: Repository, task_id: str) -> Task:
    if (task := repository.get_task(task_id)) is None:
        raise click.ClickException(f"No task with ID {task_id!r}.")
    return task


def _fmt_date(value: datetime | None) -> str:
    return value.date().isoformat() if value is not None else "-"


@click.command()
@clickx.pass_context
def show(ctx: click.Context) -> None:
    """Show the tasks, projects and milestones of the snapshot."""
    console = Console()
    with _open_repository(ctx, write=False) as repository:
        tasks = Table(title="Tasks")
        for column in ("ID", "Title", "Status", "Tags", "Due", "Projects"):
            tasks.add_column(column)
        for task in repository.get_all_tasks():
            tasks.add_row(
                task.id,
                task.title,
                f"{task.status} (!)" if task.is_orphaned else task.status,
                ", ".join(task.tags),
                _fmt_date(task.due_date),
                ", ".join(task.projects),
            )

        projects = Table(title="Projects")
        for column in ("ID", "Title", "Status", "Tags", "Task statuses"):
            projects.add_column(column)
        for project in repository.get_all_projects():
            projects.add_row(
                project.id,
                project.title,
                project.status,
                ", ".join(project.tags),
                " > ".join(project.task_statuses),
            )

        milestones = Table(title="Milestones")
        for column in ("ID", "Title", "Status", "Start", "Due", "Requires"):
            milestones.add_column(column)
        for milestone in repository.get_all_milestones():
            milestones.add_row(
                milestone.id,
                milestone.title,
                milestone.status,
                _fmt_date(milestone.start_date),
                _fmt_date(milestone.due_date),
                ", ".join(milestone.requirements),
            )

    for table in (tasks, projects, milestones):
        console.print(table)


@click.command()
@click.argument("title")
@click.option("--description", "-d", default="", help="Description (markdown).")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag to add. Repeatable.")
@click.option("--status", default=None, help="Initial status.")
@click.option(
    "--project", "-p", "projects", multiple=True, help="Project ID. Repeatable."
)
@clickx.pass_context
def add(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    title: str,
    description: str,
    tags: tuple[str, ...],
    status: str | None,
    projects: tuple[str, ...],
) -> None:
    """Create a task titled TITLE and print its ID."""
    with _open_repository(ctx) as repository:
        for project_id in projects:
            if repository.get_project(project_id) is None:
                warn(f"Project {project_id!r} does not exist; attaching anyway.")
        try:
            task = repository.create_task(
                title,
                description=description,
                tags=tags,
                status=status,
                projects=projects,
            )
        except InvalidInputError as e:
            raise click.ClickException(str(e)) from e
    click.echo(task.id)
    success(f"Created task {task.id} ({task.status})")


@click.command()
@click.argument("task_id")
@click.option(
    "--back/--forward",
    "backwards",
    default=False,
    help="Move to the previous status instead of the next one.",
)
@clickx.pass_context
def advance(ctx: click.Context, task_id: str, backwards: bool) -> None:
    """Move task TASK_ID to its next (or previous) status."""
    with _open_repository(ctx) as repository:
        task = _get_task(repository, task_id)
        before = task.status
        try:
            if backwards:
                task.decrease_status()
            else:
                task.increase_status()
        except InvalidInputError as e:
            raise click.ClickException(
                f"{e}\nSet one of the available statuses on task {task_id} first."
            ) from e
    if task.status == before:
        warn(f"Task {task_id} stays {before}: no {'previous' if backwards else 'next'} status.")
    else:
        success(f"Task {task_id}: {before} -> {task.status}")


@click.command()
@click.argument("task_id")
@click.argument("tags", nargs=-1, required=True)
@click.option("--remove", "-r", is_flag=True, help="Remove the tags instead.")
@clickx.pass_context
def tag(ctx: click.Context, task_id: str, tags: tuple[str, ...], remove: bool) -> None:
    """Add TAGS to (or remove them from) task TASK_ID."""
    with _open_repository(ctx) as repository:
        task = _get_task(repository, task_id)
        if remove:
            task.remove_tag(tags)
        else:
            task.add_tag(tags)
    success(f"Task {task_id} tags: {', '.join(task.tags) or '<none>'}")

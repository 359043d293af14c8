"""TASKLANE CLI entry point.

Defines the top-level ``tasklane`` command (via Click-Extra) and registers the
subcommands working on a snapshot file.

Examples
    $ tasklane --version
    $ tasklane -s board.json add "Write release notes" --tag docs
    $ tasklane -s board.json show
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from tasklane import __version__
from tasklane.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers import parse_log_level
from .snapshot_cmds import add, advance, show, tag

logger = logging.getLogger(__name__)


HELP = """TASKLANE command-line interface.

    Inspect and update the tasks, projects and milestones kept in a snapshot
    file. Statuses move along each task's ordered list of statuses, and tags
    are normalized (trimmed, case-folded) on every change.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--snapshot",
    "-s",
    "snapshot_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Snapshot file to work on (defaults to TASKLANE_SNAPSHOT).",
    default=None,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names, source paths, event tracing).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=Path(user_log_dir("tasklane", appauthor=False)) / "latest.log",
    envvar="TASKLANE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TASKLANE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs. Console verbosity is unchanged."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable, e.g. "
        "-L tasklane.domain.events=DEBUG."
    ),
    show_envvar=True,
)
@clickx.pass_context
def tasklane(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    snapshot_path: Path | None,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """TASKLANE command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[logging.Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, capacity=flight_recorder_capacity)
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    if debug:
        logger_levels = {**logger_levels, "tasklane.domain.events": logging.DEBUG}
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=logging.DEBUG if debug else level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        logger_levels=logger_levels,
    )

    ctx.ensure_object(dict)
    ctx.obj["snapshot_path"] = snapshot_path
    ctx.obj["debug"] = debug
    ctx.call_on_close(logging.shutdown)


tasklane.add_command(show)
tasklane.add_command(add)
tasklane.add_command(advance)
tasklane.add_command(tag)

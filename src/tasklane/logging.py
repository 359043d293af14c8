"""Logging helpers used by the TASKLANE CLI.

This module configures console logging with Rich and an in-memory "flight
recorder" that buffers log records and writes them to disk on flush. It also
provides a filter that marks third-party records with a short prefix, and a
tracer that logs every event reaching a repository's bus.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version as dist_version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from tasklane.domain.events import Event, EventHandlerUninstaller, Observable

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "tasklane"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get ``record.prefix`` set to a
    bracketed token such as "[markdown_it]"; project records get an empty
    prefix. No record is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output.

    Returns:
        The handler, ready to attach to the root logger.
    """

    # keep consistent with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = (
        "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered and written to `path` when a record
    at `flush_level` or above arrives, or on close if `flush_on_close` is set.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        A memory-backed handler with a FileHandler target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def trace_events(
    source: Observable, logger: Logger, level: int = logging.DEBUG
) -> EventHandlerUninstaller:
    """Log every event reaching the bus of `source`.

    Since entity-level changes do not leave their entity, this shows the
    lifecycle events of a repository, or every change of one entity.

    Returns:
        A callable that stops the tracing.
    """

    def log_event(event: Event) -> None:
        logger.log(level, "event %s %s", event.name, dict(event.payload))

    uninstallers = [
        source.handle(name, log_event) for name in ("inserted", "removed", "changed")
    ]

    def uninstall() -> None:
        for uninstaller in uninstallers:
            uninstaller()

    return uninstall


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Capacity of the flight recorder, or None.
        logger_levels: Per-logger level overrides.
    """

    logger.info(
        "TASKLANE %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Rich: %s", dist_version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )

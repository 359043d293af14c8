"""Helpers for parsing logger-level CLI options.

Options take the form NAME=LEVEL, either repeated or as one comma/space
separated list. Values are split into items and the textual level names are
converted into numeric logging levels.
"""

import logging
import re

import click

# dispatch of every event is logged at DEBUG; keep it out of -vvv by default
DEFAULT_LOGGER_LEVELS = {"tasklane.domain.events": logging.INFO}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the option value into non-empty NAME=LEVEL items."""
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in re.split(r"[,\s]+", v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    The result starts from `DEFAULT_LOGGER_LEVELS` and applies the given
    overrides in order.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels

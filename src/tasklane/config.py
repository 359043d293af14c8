"""Configuration utilities for TASKLANE.

This module centralizes small helpers and constants related to application
configuration. Everything is read from the environment.
"""

import os
from pathlib import Path

from tasklane.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from tasklane.interfaces.id_generator import IdGenerator

SNAPSHOT_ENV_VAR = "TASKLANE_SNAPSHOT"  # pragma: no mutate
ID_GENERATOR_ENV_VAR = "TASKLANE_ID_GENERATOR"  # pragma: no mutate

DEFAULT_ID_GENERATOR = "ulid"
ID_GENERATORS: dict[str, type[IdGenerator]] = {
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
    "simple": SimpleIdGenerator,
}


class SnapshotPathNotSetError(Exception):
    """Raised when the TASKLANE_SNAPSHOT environment variable is not set."""


class UnknownIdGeneratorError(ValueError):
    """Raised when an unknown ID generator is requested."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown ID generator {name!r}; expected one of: {', '.join(ID_GENERATORS)}"
        )
        self.name = name


def get_snapshot_path() -> Path:
    """Get the snapshot file path from the environment.

    Returns:
        The value of the `TASKLANE_SNAPSHOT` environment variable as a path.

    Raises:
        SnapshotPathNotSetError: If `TASKLANE_SNAPSHOT` is not set.
    """
    if not (path := os.environ.get(SNAPSHOT_ENV_VAR)):
        raise SnapshotPathNotSetError
    return Path(path)


def get_id_generator_name() -> str:
    """Get the name of the ID generator to use (`TASKLANE_ID_GENERATOR`, default "ulid")."""
    return (os.environ.get(ID_GENERATOR_ENV_VAR) or DEFAULT_ID_GENERATOR).strip().lower()


def build_id_generator(name: str | None = None) -> IdGenerator:
    """Build the ID generator registered under `name`.

    Args:
        name: One of the keys of `ID_GENERATORS`. If None, the name is read
            from the environment.

    Raises:
        UnknownIdGeneratorError: If no generator is registered under `name`.
    """
    if name is None:
        name = get_id_generator_name()
    if not (generator_cls := ID_GENERATORS.get(name)):
        raise UnknownIdGeneratorError(name)
    return generator_cls()

"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from tasklane.config import ID_GENERATORS
from tasklane.interfaces.id_generator import IdGenerator


@pytest.fixture(params=sorted(ID_GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for every backend selectable by name.

    The backends are those of `tasklane.config.ID_GENERATORS`, so a generator
    registered there is held to this contract automatically.
    """
    yield ID_GENERATORS[request.param]()


@pytest.fixture(params=["ulid"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield generators that promise lexicographically increasing ids."""
    yield ID_GENERATORS[request.param]()

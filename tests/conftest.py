"""Global pytest fixtures for TASKLANE."""

from __future__ import annotations

import pytest

from tasklane.adapters.id_generators import SimpleIdGenerator
from tasklane.domain.identity import IdentityProvider
from tasklane.service_layer.repositories import Repository
from tests.helpers.events import EventRecorder


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Sequential ids ("0000...1", "0000...2", ...) for predictable tests."""
    return SimpleIdGenerator(length=4)


@pytest.fixture
def repository(id_generator: SimpleIdGenerator) -> Repository:  # pylint: disable=redefined-outer-name
    """An empty repository handing out sequential ids."""
    return Repository(IdentityProvider(id_generator))


@pytest.fixture
def recorder() -> EventRecorder:
    """A fresh event recorder."""
    return EventRecorder()

"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers.markers import add_default_marker

# pylint: disable=unused-argument

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    add_default_marker(items, E2E_ROOT, pytest.mark.e2e)


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    """Location of the snapshot file used by a test (not created)."""
    return tmp_path / "board.json"


@pytest.fixture
def runner(snapshot_path: Path) -> CliRunner:  # pylint: disable=redefined-outer-name
    """A CliRunner pointing TASKLANE at `snapshot_path` with sequential ids."""
    return CliRunner(
        env={
            "TASKLANE_SNAPSHOT": str(snapshot_path),
            "TASKLANE_ID_GENERATOR": "simple",
            "TASKLANE_LOG_PATH": str(snapshot_path.parent / "logs" / "latest.log"),
        }
    )

"""Pytest fixtures for snapshot store contract tests.

Provided fixtures
-----------------
- **store**: Parametrized backend factory returning a **fresh**, empty
  `SnapshotStore` per test. Add new backends to `params` and branch below.
- **sample_snapshot**: A small snapshot as produced by
  `Repository.to_snapshot()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from tasklane.adapters.snapshot_store import (
    InMemorySnapshotStore,
    JsonFileSnapshotStore,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tasklane.interfaces.snapshot_store import SnapshotStore


@pytest.fixture(params=["memory", "json_file"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> SnapshotStore:
    """Return a fresh snapshot store for the requested backend.

    Current params:
      - `"memory"` → `InMemorySnapshotStore`
      - `"json_file"` → `JsonFileSnapshotStore` in a temporary directory
    """

    match request.param:
        case "memory":
            return InMemorySnapshotStore()
        case "json_file":
            return JsonFileSnapshotStore(tmp_path / "board.json")
        case _:
            raise ValueError(f"unknown store type: {request.param}")


@pytest.fixture
def sample_snapshot() -> dict[str, Any]:
    """A small, valid snapshot."""
    return {
        "tasks": {
            "t-1": {
                "title": "Write release notes ✍",
                "tags": ["docs"],
                "status": "pending",
                "statuses": ["pending", "done"],
                "counter": None,
            }
        },
        "projects": {},
        "milestones": {},
    }

"""Bootstrap (composition root) for TASKLANE.

Assembles the application at runtime: wires concrete adapters (ID generator,
snapshot store) to the repository, reads configuration, and exposes a small
container for entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/domain).
- This package may import: `tasklane.adapters`, `tasklane.service_layer`,
  `tasklane.interfaces`, `tasklane.domain`, and `tasklane.config`.
- Inner layers must not import `tasklane.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_repository,
    build_snapshot_store,
    load_repository,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_repository",
    "build_snapshot_store",
    "load_repository",
]

"""Local filesystem-based snapshot store adapter."""

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from tasklane.interfaces.snapshot_store import SnapshotNotFoundError, SnapshotStore


class JsonFileSnapshotStore(SnapshotStore):
    """SnapshotStore that keeps the snapshot in one JSON file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """The JSON file backing this store."""
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> dict[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except FileNotFoundError:
            raise SnapshotNotFoundError(str(self._path)) from None

    def write(self, snapshot: Mapping[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        # write next to the destination, then atomically replace it
        with tempfile.NamedTemporaryFile(  # pragma: no mutate
            "w", dir=self._path.parent, suffix=".tmp", encoding="utf-8", delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                json.dump(snapshot, tmp, indent=2, ensure_ascii=False)
                tmp.write("\n")
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        os.replace(tmp_path, self._path)

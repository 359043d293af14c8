"""Entity id generators, selectable with ``TASKLANE_ID_GENERATOR``."""

import threading
import uuid

from ulid import monotonic

from tasklane.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Default generator: monotonic ULIDs from `ulid-py`.

    Ids sort in creation order, so a snapshot listed by id lists entities in
    the order they were created, even within the same millisecond.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDs in hyphenated form; ids carry no creation order."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Zero-padded sequence numbers: ``0...01``, ``0...02``, ...

    The default width matches a ULID. Numbering restarts with every process,
    so ids from this generator clash with those already in a snapshot; use it
    in tests and demos only.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"

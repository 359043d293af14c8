"""Status state machine.

A `StatusManager` holds the current status of an item and the ordered list of
statuses it may take. The order describes the intended progression: the status
can be moved one step forward or backward along the list, or set directly to
any listed status.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tasklane.domain.errors import EmptyStatusesError, InvalidStatusError
from tasklane.domain.events import Observable
from tasklane.domain.utils import normalize_label, normalize_labels

logger = logging.getLogger(__name__)

STATUS_CHANGED = "changed.status"

DEFAULT_STATUSES: tuple[str, ...] = ("pending", "in progress", "done")
"""Good enough for most items; replace with `set_available_statuses` when not."""


def validate_statuses(statuses: Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a list of statuses, dropping duplicates and empty entries.

    Args:
        statuses: The raw statuses, in progression order.

    Returns:
        The normalized statuses, in their original order.

    Raises:
        EmptyStatusesError: If `statuses` is None, empty, a bare string, or
            contains nothing but blank entries.
    """
    if not statuses or isinstance(statuses, str):
        raise EmptyStatusesError(statuses)
    statuses = list(statuses)
    if not statuses:
        raise EmptyStatusesError(statuses)
    if not (processed := normalize_labels(statuses)):
        raise EmptyStatusesError(statuses)
    return tuple(processed)


class StatusManager(Observable):
    """Manages the progression of a status along an ordered list.

    The initial status is the first of the available statuses, since a fresh
    item has had no work done on it yet.

    Args:
        available_statuses: Initial statuses; defaults to `DEFAULT_STATUSES`.

    Raises:
        EmptyStatusesError: If `available_statuses` is given but empty.

    Note:
        Replacing the available statuses does not reconcile the current one,
        which may then no longer be listed (see `is_orphaned`). Stepping with
        `increase_status` / `decrease_status` fails in that state until a
        listed status is set.
    """

    def __init__(self, available_statuses: Iterable[str] | None = None) -> None:
        super().__init__()
        self._available_statuses = (
            validate_statuses(available_statuses)
            if available_statuses is not None
            else DEFAULT_STATUSES
        )
        self._status = self._available_statuses[0]

    @property
    def status(self) -> str:
        """The current status."""
        return self._status

    @property
    def available_statuses(self) -> tuple[str, ...]:
        """A copy of the available statuses, in progression order."""
        return tuple(self._available_statuses)

    @property
    def is_orphaned(self) -> bool:
        """True if the current status is no longer one of the available statuses."""
        return self._status not in self._available_statuses

    def set_status(self, status: str) -> StatusManager:
        """Set the current status to one of the available statuses.

        Setting the current status again does nothing and emits no event.

        Raises:
            InvalidStatusError: If the status is not one of the available statuses.
        """
        normalized = normalize_label(status)
        if normalized == self._status:
            return self
        if normalized not in self._available_statuses:
            raise InvalidStatusError(status, self._available_statuses)

        logger.debug("Status %r -> %r", self._status, normalized)
        self._status = normalized
        self._events.trigger(STATUS_CHANGED, {"status": normalized})
        return self

    def set_available_statuses(self, statuses: Iterable[str] | None) -> StatusManager:
        """Replace the available statuses.

        Raises:
            EmptyStatusesError: If `statuses` is missing, empty, or only blank.
        """
        processed = validate_statuses(statuses)
        self._available_statuses = processed
        if self.is_orphaned:
            logger.warning(
                "Status %r is not one of the new available statuses %s",
                self._status,
                list(processed),
            )
        self._events.trigger(STATUS_CHANGED, {"available_statuses": list(processed)})
        return self

    def increase_status(self) -> StatusManager:
        """Move to the next status; does nothing at the last one.

        Raises:
            InvalidStatusError: If the current status is not one of the available statuses.
        """
        index = self._current_index()
        if index + 1 >= len(self._available_statuses):
            return self
        return self.set_status(self._available_statuses[index + 1])

    def decrease_status(self) -> StatusManager:
        """Move to the previous status; does nothing at the first one.

        Raises:
            InvalidStatusError: If the current status is not one of the available statuses.
        """
        index = self._current_index()
        if index == 0:
            return self
        return self.set_status(self._available_statuses[index - 1])

    def _current_index(self) -> int:
        try:
            return self._available_statuses.index(self._status)
        except ValueError:
            raise InvalidStatusError(self._status, self._available_statuses) from None

    def restore(
        self, status: str | None, available_statuses: Iterable[str] | None
    ) -> None:
        """Reinstate a persisted state without emitting events.

        Unlike `set_status`, an unlisted `status` is kept as is, so a saved
        orphaned status survives a round trip. A missing status falls back to
        the first available one.

        Raises:
            EmptyStatusesError: If `available_statuses` is given but empty.
        """
        if available_statuses is not None:
            self._available_statuses = validate_statuses(available_statuses)
        self._status = (
            normalize_label(status) if status is not None else self._available_statuses[0]
        )

"""Module including value objects used across the domain layer."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tasklane.domain.errors import InvalidInputError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Counter:
    """Value object tracking how many items of a task are in each state.

    Example: ``Counter({"pending": 2, "in progress": 1, "done": 3}, total=6)``.

    Raises:
        InvalidInputError: If `states` is not a mapping of state names to
            integers, or `total` is not an integer.
    """

    states: Mapping[str, int] = field(default_factory=dict)
    total: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.states, Mapping):
            raise InvalidInputError(
                f"Counter states must be a mapping, got {self.states!r}", self.states
            )
        for state, count in self.states.items():
            if not isinstance(state, str) or not _is_int(count):
                raise InvalidInputError(
                    "Counter states must map names to integers, "
                    f"got {state!r}: {count!r}",
                    self.states,
                )
        if not _is_int(self.total):
            raise InvalidInputError(
                f"Counter total must be an integer, got {self.total!r}", self.total
            )
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))

    def count(self, state: str) -> int:
        """Return the number of items in `state` (0 if the state is not tracked)."""
        return self.states.get(state, 0)

    def to_dict(self) -> dict[str, object]:
        """Return a plain record of the counter."""
        return {"states": dict(self.states), "total": self.total}

"""Unit tests for tasklane.utils.records."""

import re
from dataclasses import asdict, dataclass, field

import pytest

from tasklane.utils.records import dict_to_dataclass

# pylint: disable=magic-value-comparison


@dataclass(frozen=True, slots=True)
class Tally:
    """Nested record for testing."""

    states: dict[str, int]
    total: int = 0


@dataclass(frozen=True, slots=True)
class Card:
    """Outer record for testing."""

    title: str
    labels: list[str] = field(default_factory=list)
    due: str | None = None
    tally: Tally | None = None


def test_round_trip_through_asdict():
    """A record rebuilt from its asdict() form equals the original."""
    original = Card("T", labels=["a"], due="2030-01-01", tally=Tally({"done": 1}, 2))
    assert dict_to_dataclass(Card, asdict(original)) == original


def test_defaults_fill_missing_fields():
    """Missing optional fields take their defaults and factories."""
    card = dict_to_dataclass(Card, {"title": "T"})
    assert card == Card("T")
    assert card.labels == []


def test_optional_nested_record_accepts_none():
    """A `Record | None` field stays None when given None."""
    assert dict_to_dataclass(Card, {"title": "T", "tally": None}).tally is None


def test_nested_record_defaults():
    """Defaults apply inside nested records too."""
    card = dict_to_dataclass(Card, {"title": "T", "tally": {"states": {}}})
    assert card.tally == Tally({}, 0)


def test_unknown_keys_are_ignored():
    """Keys that are not fields do not reach the constructor."""
    assert dict_to_dataclass(Card, {"title": "T", "color": "red"}) == Card("T")


def test_missing_required_field():
    """A required field missing from the mapping raises KeyError."""
    with pytest.raises(KeyError, match="Missing required field 'title'"):
        dict_to_dataclass(Card, {"labels": []})


def test_not_a_dataclass():
    """Only dataclass types can be built."""
    with pytest.raises(
        TypeError, match=re.escape("<class 'int'> is not a dataclass type")
    ):
        dict_to_dataclass(int, {"a": 1})

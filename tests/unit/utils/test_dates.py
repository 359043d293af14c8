"""Unit tests for tasklane.utils.dates."""

from datetime import datetime, timedelta, timezone

import pytest

from tasklane.utils.dates import format_iso_datetime, parse_iso_datetime


@pytest.mark.parametrize("value", [None, ""])
def test_parse_nothing(value):
    """None and the empty string mean no date."""
    assert parse_iso_datetime(value) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2030-01-02T03:04:05Z", datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
        (
            "2030-01-02T03:04:05.250Z",
            datetime(2030, 1, 2, 3, 4, 5, 250000, tzinfo=timezone.utc),
        ),
        (
            "2030-01-02T03:04:05+02:00",
            datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2))),
        ),
        ("2030-01-02", datetime(2030, 1, 2, tzinfo=timezone.utc)),
        ("2030-01-02T03:04:05", datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ],
)
def test_parse(value, expected):
    """ISO-8601 strings are parsed; a trailing Z or no offset means UTC."""
    assert parse_iso_datetime(value) == expected


def test_parse_invalid():
    """Anything else is a ValueError."""
    with pytest.raises(ValueError):
        parse_iso_datetime("next tuesday")


def test_format_passes_none_through():
    """Formatting None gives None."""
    assert format_iso_datetime(None) is None


def test_format_then_parse_is_identity():
    """A formatted datetime parses back to an equal one."""
    moment = datetime(2030, 6, 1, 12, 30, tzinfo=timezone.utc)
    assert parse_iso_datetime(format_iso_datetime(moment)) == moment


@pytest.mark.parametrize(
    "value", ["2030-01-02", "2030-01-02T03:04:05", "2030-01-02T03:04:05Z"]
)
def test_parse_is_always_aware(value):
    """Parsed values can be compared with aware datetimes."""
    parsed = parse_iso_datetime(value)
    assert parsed.tzinfo is not None
    assert parsed < datetime(2031, 1, 1, tzinfo=timezone.utc)

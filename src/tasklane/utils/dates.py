"""ISO-8601 date helpers."""

from datetime import datetime, timezone


def parse_iso_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 string; None and the empty string give None.

    A trailing ``Z`` (as written by JavaScript's ``Date.toISOString``) is
    read as UTC, and so is a value without any offset. The result is always
    timezone-aware.

    Raises:
        ValueError: If `value` is not a valid ISO-8601 date or datetime.
    """
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_iso_datetime(value: datetime | None) -> str | None:
    """Format a datetime as ISO-8601, passing None through."""
    return value.isoformat() if value is not None else None

"""Timestamp parsing and normalization utilities.

Sample timestamps are keyed by UNIX milliseconds, interval phases carry
timezone-aware datetimes. ``parse_to_datetime`` and ``parse_to_ms`` raise
ValueError for invalid input; ``try_parse_to_datetime`` returns None instead so
that undated interval records can be filtered out quietly.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

TimestampLike = str | int | float | datetime | date


def parse_to_datetime(ts_value: TimestampLike) -> datetime:
    """Parse a timestamp to a timezone-aware datetime.

    Args:
        ts_value: Timestamp in one of:
            - datetime: naive values are assumed to be UTC
            - date: midnight UTC
            - int/float: Unix timestamp in milliseconds
            - str: ISO 8601 format string (``Z`` suffix allowed)

    Returns:
        datetime object with tzinfo set.

    Raises:
        ValueError: If input is None, empty string, or invalid format.
    """
    if ts_value is None:
        raise ValueError("Timestamp cannot be None")

    if isinstance(ts_value, datetime):
        if ts_value.tzinfo is None:
            return ts_value.replace(tzinfo=timezone.utc)
        return ts_value

    # datetime is a date subclass, so this only sees plain dates
    if isinstance(ts_value, date):
        return datetime(ts_value.year, ts_value.month, ts_value.day, tzinfo=timezone.utc)

    # bool is an int subclass but never a timestamp
    if isinstance(ts_value, bool):
        raise ValueError("Timestamp cannot be a boolean")

    if isinstance(ts_value, (int, float)):
        return ms_to_datetime(ts_value)

    if isinstance(ts_value, str):
        ts_str = ts_value.strip()
        if not ts_str:
            raise ValueError("Timestamp string cannot be empty")

        if ts_str.endswith("Z"):
            ts_str = ts_str[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(ts_str)
        except ValueError as exc:
            raise ValueError("Invalid timestamp format. Expected ISO 8601 string or UNIX milliseconds.") from exc

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise ValueError(f"Unsupported timestamp type: {type(ts_value)}. Expected datetime, date, int, float, or ISO 8601 string.")


def try_parse_to_datetime(ts_value: TimestampLike | None) -> datetime | None:
    """Like :func:`parse_to_datetime`, but returns None for missing or invalid input."""
    if ts_value is None:
        return None
    try:
        return parse_to_datetime(ts_value)
    except ValueError:
        return None


def parse_to_ms(ts_value: TimestampLike) -> int:
    """Normalize timestamp to UNIX milliseconds.

    Args:
        ts_value: Timestamp in one of:
            - datetime: converted to UNIX milliseconds
            - int/float: treated as UNIX time in milliseconds
            - str: parsed as ISO 8601 format string

    Returns:
        int: UNIX timestamp in milliseconds.

    Raises:
        ValueError: If input is None, empty string, or invalid format.
    """
    if ts_value is None:
        raise ValueError("Timestamp cannot be None")

    if isinstance(ts_value, (int, float)) and not isinstance(ts_value, bool):
        return int(ts_value)

    dt = parse_to_datetime(ts_value)
    return int(dt.timestamp() * 1000)


def ms_to_datetime(ms: int | float) -> datetime:
    """Convert UNIX milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)

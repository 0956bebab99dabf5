"""Tests for timestamp parsing utilities."""

from datetime import date, datetime, timedelta, timezone

import pytest

from metricgraph.utils.timestamp import ms_to_datetime, parse_to_datetime, parse_to_ms, try_parse_to_datetime

JAN_1_MS = 1704067200000


class TestParseToDatetime:
    """Tests for parse_to_datetime."""

    def test_naive_datetime_gets_utc(self) -> None:
        """Naive datetimes are assumed to be UTC."""
        result = parse_to_datetime(datetime(2024, 1, 1))

        assert result == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_aware_datetime_kept(self) -> None:
        """Aware datetimes keep their offset."""
        jst = timezone(timedelta(hours=9))
        dt = datetime(2024, 1, 1, 9, tzinfo=jst)

        assert parse_to_datetime(dt) is dt

    def test_unix_ms(self) -> None:
        """Numbers are UNIX milliseconds."""
        assert parse_to_datetime(JAN_1_MS) == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_iso_with_z_suffix(self) -> None:
        """A trailing Z means UTC."""
        assert parse_to_datetime("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_date_only_string(self) -> None:
        """Date-only strings parse to midnight UTC."""
        assert parse_to_datetime("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_plain_date(self) -> None:
        """Plain dates parse to midnight UTC."""
        assert parse_to_datetime(date(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert parse_to_ms(date(2024, 1, 1)) == JAN_1_MS

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            (None, "cannot be None"),
            ("  ", "cannot be empty"),
            ("not-a-timestamp", "Invalid timestamp format"),
            (True, "cannot be a boolean"),
            ([1, 2], "Unsupported timestamp type"),
        ],
    )
    def test_invalid_input(self, value, message) -> None:
        """Invalid input raises ValueError."""
        with pytest.raises(ValueError, match=message):
            parse_to_datetime(value)


class TestTryParseToDatetime:
    """Tests for try_parse_to_datetime."""

    def test_valid(self) -> None:
        """Valid input parses like parse_to_datetime."""
        assert try_parse_to_datetime("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "soon", False])
    def test_invalid_returns_none(self, value) -> None:
        """Missing or invalid input gives None."""
        assert try_parse_to_datetime(value) is None


class TestParseToMs:
    """Tests for parse_to_ms and ms_to_datetime."""

    def test_numbers_pass_through(self) -> None:
        """Numbers are already milliseconds; floats are truncated."""
        assert parse_to_ms(JAN_1_MS) == JAN_1_MS
        assert parse_to_ms(JAN_1_MS + 0.9) == JAN_1_MS

    def test_string_and_datetime(self) -> None:
        """Strings and datetimes convert to the same instant."""
        assert parse_to_ms("2024-01-01T09:00:00+09:00") == JAN_1_MS
        assert parse_to_ms(datetime(2024, 1, 1)) == JAN_1_MS

    def test_ms_to_datetime(self) -> None:
        """Milliseconds convert back to UTC datetimes."""
        assert ms_to_datetime(JAN_1_MS) == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert ms_to_datetime(-86_400_000).date().isoformat() == "1969-12-31"

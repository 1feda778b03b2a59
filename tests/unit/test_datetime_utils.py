"""
Unit tests for fuel_quote.utils.datetime_utils
"""
from datetime import date, datetime, timedelta, timezone

from fuel_quote.utils.datetime_utils import ensure_utc, parse_date, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc - no config needed"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.year == 2025
        assert result.month == 1
        assert result.day == 15

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestUtcNow:
    def test_is_aware_utc(self):
        assert utc_now().tzinfo == timezone.utc


class TestParseDate:
    """Tests for parse_date"""

    def test_none_empty_returns_none(self):
        assert parse_date(None) is None
        assert parse_date("") is None

    def test_iso_date_string(self):
        assert parse_date("2024-04-10") == date(2024, 4, 10)

    def test_iso_timestamp_uses_date_part(self):
        assert parse_date("2024-04-10T23:30:00Z") == date(2024, 4, 10)

    def test_date_and_datetime_pass_through(self):
        assert parse_date(date(2024, 4, 10)) == date(2024, 4, 10)
        assert parse_date(datetime(2024, 4, 10, 8, 0)) == date(2024, 4, 10)

    def test_invalid_returns_none(self):
        assert parse_date("not-a-date") is None
        assert parse_date("2024-13-45") is None

from datetime import date, datetime, timezone

import pytest

from core.clock import as_utc, calendar_day, parse_day


def test_parse_day_accepts_dates_and_datetimes():
    assert parse_day("2025-03-10", "UTC") == date(2025, 3, 10)
    assert parse_day("2025-03-10T23:30:00Z", "UTC") == date(2025, 3, 10)
    assert parse_day("2025-03-10T23:30:00Z", "Asia/Tokyo") == date(2025, 3, 11)
    assert parse_day("2025-03-10T23:30:00", "Asia/Tokyo") == date(2025, 3, 10)


def test_parse_day_rejects_garbage():
    with pytest.raises(ValueError):
        parse_day("not-a-day", "UTC")


def test_naive_datetimes_are_utc():
    naive = datetime(2025, 3, 10, 23, 30)
    assert as_utc(naive).tzinfo is timezone.utc
    assert calendar_day(naive, "America/New_York") == date(2025, 3, 10)

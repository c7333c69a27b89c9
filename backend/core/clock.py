from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes (e.g. read back from SQLite) are treated as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def calendar_day(dt: datetime, tz_name: str) -> date:
    return as_utc(dt).astimezone(ZoneInfo(tz_name)).date()


def today(tz_name: str) -> date:
    return calendar_day(utcnow(), tz_name)


def parse_day(value: str, tz_name: str) -> date:
    """
    Accepts "YYYY-MM-DD" or a full ISO-8601 datetime.
    Datetimes with an offset are converted into tz_name first; naive ones are read as tz_name local time.
    Raises ValueError on anything else.
    """
    value = value.strip()
    if len(value) == 10:
        return date.fromisoformat(value)
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone(ZoneInfo(tz_name)).date()

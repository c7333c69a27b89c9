"""
Per-entity retrieval over the record store.

Every listing follows the same shape: owner filter, optional secondary filter, newest first,
then truncation. Python's sort is stable, so records sharing a timestamp keep insertion order.
"""

from datetime import date

from core.clock import calendar_day
from database.store import RecordStore
from schemas.alerts import Alert
from schemas.exercises import Exercise
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats
from schemas.users import User

DEFAULT_SENSOR_LIMIT = 50
DEFAULT_FALL_LIMIT = 20
DEFAULT_ALERT_LIMIT = 20
DEFAULT_STATS_DAYS = 7


def _truncate(records: list, limit: int | None) -> list:
    return records if limit is None else records[: max(limit, 0)]


def get_user(store: RecordStore, user_id: str) -> User | None:
    return store.users.get(user_id)


def get_user_by_username(store: RecordStore, username: str) -> User | None:
    matches = store.users.list(lambda u: u.username == username)
    return matches[0] if matches else None


def get_latest_sensor_data(store: RecordStore, user_id: str) -> SensorData | None:
    readings = get_sensor_data(store, user_id, limit=1)
    return readings[0] if readings else None


def get_sensor_data(store: RecordStore, user_id: str, limit: int | None = DEFAULT_SENSOR_LIMIT) -> list[SensorData]:
    readings = sorted(store.sensor_data.list(user_id=user_id), key=lambda r: r.timestamp, reverse=True)
    return _truncate(readings, limit)


def get_exercises(store: RecordStore) -> list[Exercise]:
    return store.exercises.list()


def get_exercise(store: RecordStore, exercise_id: str) -> Exercise | None:
    return store.exercises.get(exercise_id)


def get_exercise_sessions(
    store: RecordStore, user_id: str, day: date | None = None, tz_name: str = "UTC"
) -> list[ExerciseSession]:
    where = None
    if day is not None:
        # Same calendar day in tz_name, not a rolling 24h window.
        where = lambda s: calendar_day(s.start_time, tz_name) == day  # noqa: E731
    sessions = store.exercise_sessions.list(where, user_id=user_id)
    return sorted(sessions, key=lambda s: s.start_time, reverse=True)


def get_exercise_session(store: RecordStore, session_id: str) -> ExerciseSession | None:
    return store.exercise_sessions.get(session_id)


def get_fall_detections(
    store: RecordStore, user_id: str, limit: int | None = DEFAULT_FALL_LIMIT
) -> list[FallDetection]:
    falls = sorted(store.fall_detections.list(user_id=user_id), key=lambda f: f.timestamp, reverse=True)
    return _truncate(falls, limit)


def get_alerts(store: RecordStore, user_id: str, limit: int | None = DEFAULT_ALERT_LIMIT) -> list[Alert]:
    alerts = sorted(store.alerts.list(user_id=user_id), key=lambda a: a.timestamp, reverse=True)
    return _truncate(alerts, limit)


def mark_alert_read(store: RecordStore, alert_id: str) -> Alert | None:
    return store.alerts.update(alert_id, {"is_read": True})


def get_daily_stats(store: RecordStore, user_id: str, days: int | None = DEFAULT_STATS_DAYS) -> list[DailyStats]:
    # The N most recently dated rows; missing days are not filled in.
    stats = sorted(store.daily_stats.list(user_id=user_id), key=lambda s: s.date, reverse=True)
    return _truncate(stats, days)


def find_daily_stats(store: RecordStore, user_id: str, day: date) -> DailyStats | None:
    matches = store.daily_stats.list(lambda s: s.date == day, user_id=user_id)
    return matches[0] if matches else None

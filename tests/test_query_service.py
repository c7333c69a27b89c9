from datetime import date

from conftest import at, put_alert, put_reading, put_session
from schemas.sensor import SensorDataCreate
from schemas.stats import DailyStatsCreate
from services import query_service


def test_latest_sensor_data_scenario(store):
    created = store.sensor_data.create(SensorDataCreate(user_id="u1", step_count=1200))
    latest = query_service.get_latest_sensor_data(store, "u1")
    assert latest.model_dump() == created.model_dump()
    assert query_service.get_latest_sensor_data(store, "u2") is None


def test_latest_sensor_data_is_max_timestamp(store):
    put_reading(store, "u1", at(2025, 3, 1, 8), step_count=1)
    newest = put_reading(store, "u1", at(2025, 3, 1, 16), step_count=3)
    put_reading(store, "u1", at(2025, 3, 1, 12), step_count=2)
    put_reading(store, "u2", at(2025, 3, 2, 0), step_count=99)
    assert query_service.get_latest_sensor_data(store, "u1").id == newest.id


def test_sensor_history_newest_first_and_truncated(store):
    for hour in range(10):
        put_reading(store, "u1", at(2025, 3, 1, hour), step_count=hour)
    history = query_service.get_sensor_data(store, "u1", limit=4)
    assert [r.step_count for r in history] == [9, 8, 7, 6]
    assert len(query_service.get_sensor_data(store, "u1", limit=None)) == 10
    assert query_service.get_sensor_data(store, "u1", limit=0) == []


def test_sensor_history_default_limit(store):
    for minute in range(60):
        put_reading(store, "u1", at(2025, 3, 1, 0, minute))
    assert len(query_service.get_sensor_data(store, "u1")) == query_service.DEFAULT_SENSOR_LIMIT


def test_listings_never_cross_owners(store):
    put_alert(store, "u1", at(2025, 3, 1))
    put_alert(store, "u2", at(2025, 3, 2))
    put_session(store, "u2", at(2025, 3, 2))
    assert {a.user_id for a in query_service.get_alerts(store, "u1")} == {"u1"}
    assert query_service.get_exercise_sessions(store, "u1") == []


def test_same_timestamp_keeps_insertion_order(store):
    first = put_alert(store, "u1", at(2025, 3, 1, 9), title="first")
    second = put_alert(store, "u1", at(2025, 3, 1, 9), title="second")
    assert [a.id for a in query_service.get_alerts(store, "u1")] == [first.id, second.id]


def test_sessions_day_filter_uses_calendar_day(store):
    late = put_session(store, "u1", at(2025, 3, 10, 23, 30))
    early = put_session(store, "u1", at(2025, 3, 10, 0, 5))
    put_session(store, "u1", at(2025, 3, 11, 0, 5))

    same_day = query_service.get_exercise_sessions(store, "u1", day=date(2025, 3, 10))
    assert [s.id for s in same_day] == [late.id, early.id]
    assert len(query_service.get_exercise_sessions(store, "u1")) == 3


def test_sessions_day_filter_respects_time_zone(store):
    session = put_session(store, "u1", at(2025, 3, 10, 23, 30))
    in_tokyo = query_service.get_exercise_sessions(store, "u1", day=date(2025, 3, 11), tz_name="Asia/Tokyo")
    assert [s.id for s in in_tokyo] == [session.id]
    assert query_service.get_exercise_sessions(store, "u1", day=date(2025, 3, 11)) == []


def test_daily_stats_most_recent_rows_descending(store):
    for day in [3, 1, 10, 7, 5, 2, 9, 4, 8, 6]:
        store.daily_stats.create(DailyStatsCreate(user_id="u1", date=date(2025, 3, day), total_steps=day * 1000))
    stats = query_service.get_daily_stats(store, "u1")
    assert len(stats) == 7
    assert [s.date.day for s in stats] == [10, 9, 8, 7, 6, 5, 4]


def test_daily_stats_does_not_fill_gaps(store):
    store.daily_stats.create(DailyStatsCreate(user_id="u1", date=date(2025, 1, 1)))
    store.daily_stats.create(DailyStatsCreate(user_id="u1", date=date(2025, 3, 1)))
    assert [s.date for s in query_service.get_daily_stats(store, "u1", days=7)] == [date(2025, 3, 1), date(2025, 1, 1)]


def test_mark_alert_read_is_idempotent(store):
    alert = put_alert(store, "u1", at(2025, 3, 1))
    once = query_service.mark_alert_read(store, alert.id)
    twice = query_service.mark_alert_read(store, alert.id)
    assert once.is_read is True
    assert twice.model_dump() == once.model_dump()
    assert query_service.mark_alert_read(store, "missing") is None


def test_two_alerts_one_read(store):
    first = put_alert(store, "u1", at(2025, 3, 1, 8))
    put_alert(store, "u1", at(2025, 3, 1, 9))
    query_service.mark_alert_read(store, first.id)

    alerts = query_service.get_alerts(store, "u1")
    assert len(alerts) == 2
    assert len([a for a in alerts if a.is_read is False]) == 1


def test_default_exercise_catalog(store):
    names = [e.name for e in query_service.get_exercises(store)]
    assert names == ["Leg Extensions", "Range of Motion", "Balance Training"]
    exercise = query_service.get_exercises(store)[0]
    assert query_service.get_exercise(store, exercise.id).name == "Leg Extensions"

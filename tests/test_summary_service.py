from datetime import timedelta

from conftest import put_alert, put_reading
from core.clock import today, utcnow
from schemas.sessions import ExerciseSessionCreate
from schemas.stats import DailyStatsCreate
from services.summary_service import build_dashboard_summary, step_change_pct


def test_step_change_pct():
    assert step_change_pct(8247, 7350) == 12
    assert step_change_pct(5000, 10000) == -50
    assert step_change_pct(5000, 0) is None
    assert step_change_pct(5000, None) is None


def test_summary_for_new_user(store, settings):
    summary = build_dashboard_summary(store, "nobody", settings)
    assert summary.today_steps == 0
    assert summary.step_change_pct is None
    assert summary.stability_score is None
    assert summary.is_connected is False
    assert summary.unread_alerts == 0


def test_summary_combines_stats_sensor_sessions_and_alerts(store, settings):
    day = today(settings.timezone)
    store.daily_stats.create(DailyStatsCreate(user_id="u1", date=day - timedelta(days=1), total_steps=8000))
    store.daily_stats.create(
        DailyStatsCreate(user_id="u1", date=day, total_steps=10000, exercise_minutes=50, fall_count=1)
    )
    put_reading(store, "u1", utcnow() - timedelta(hours=1), stability_score=70, battery_level=10)
    put_reading(store, "u1", utcnow(), stability_score=91, battery_level=64)
    session = store.exercise_sessions.create(ExerciseSessionCreate(user_id="u1", exercise_id="e1", status="in_progress"))
    store.exercise_sessions.update(session.id, {"status": "completed"})
    alert = put_alert(store, "u1", utcnow())
    put_alert(store, "u1", utcnow(), is_read=True)

    summary = build_dashboard_summary(store, "u1", settings)
    assert summary.today_steps == 10000
    assert summary.yesterday_steps == 8000
    assert summary.step_change_pct == 25
    assert summary.exercise_goal_achieved is True
    assert summary.falls_today == 1
    assert summary.completed_sessions_today == 1
    assert (summary.stability_score, summary.battery_level) == (91, 64)
    assert summary.unread_alerts == 1
    assert alert.is_read is False

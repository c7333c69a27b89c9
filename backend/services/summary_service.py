from __future__ import annotations

from core.clock import today
from core.config import Settings
from database.store import RecordStore
from schemas.summary import DashboardSummary
from services import query_service


def step_change_pct(today_steps: int, previous_steps: int | None) -> int | None:
    if not previous_steps:
        return None
    return round((today_steps - previous_steps) / previous_steps * 100)


def build_dashboard_summary(store: RecordStore, user_id: str, settings: Settings) -> DashboardSummary:
    # "Today" and "yesterday" are the two most recently dated stats rows, as the dashboard cards show them.
    recent = query_service.get_daily_stats(store, user_id, days=2)
    current = recent[0] if recent else None
    previous = recent[1] if len(recent) > 1 else None

    latest = query_service.get_latest_sensor_data(store, user_id)
    sessions_today = query_service.get_exercise_sessions(
        store, user_id, day=today(settings.timezone), tz_name=settings.timezone
    )
    alerts = query_service.get_alerts(store, user_id, limit=None)

    today_steps = current.total_steps if current else 0
    exercise_minutes = current.exercise_minutes if current else 0
    goal = settings.default_exercise_goal_minutes

    return DashboardSummary(
        user_id=user_id,
        today_steps=today_steps,
        yesterday_steps=previous.total_steps if previous else None,
        step_change_pct=step_change_pct(today_steps, previous.total_steps if previous else None),
        exercise_minutes=exercise_minutes,
        exercise_goal_minutes=goal,
        exercise_goal_achieved=exercise_minutes >= goal,
        falls_today=current.fall_count if current else 0,
        completed_sessions_today=sum(1 for s in sessions_today if s.status == "completed"),
        stability_score=latest.stability_score if latest else None,
        battery_level=latest.battery_level if latest else None,
        is_connected=latest.is_connected if latest else False,
        unread_alerts=sum(1 for a in alerts if not a.is_read),
    )

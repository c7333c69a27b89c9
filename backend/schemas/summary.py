from schemas.common import CamelModel


class DashboardSummary(CamelModel):
    user_id: str
    today_steps: int
    yesterday_steps: int | None
    step_change_pct: int | None
    exercise_minutes: int
    exercise_goal_minutes: int
    exercise_goal_achieved: bool
    falls_today: int
    completed_sessions_today: int
    stability_score: int | None
    battery_level: int | None
    is_connected: bool
    unread_alerts: int

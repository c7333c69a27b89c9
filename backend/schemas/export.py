from datetime import datetime

from schemas.alerts import Alert
from schemas.common import CamelModel
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats


class ExportSnapshot(CamelModel):
    user_id: str
    sensor_data: list[SensorData]
    exercise_sessions: list[ExerciseSession]
    fall_detections: list[FallDetection]
    alerts: list[Alert]
    daily_stats: list[DailyStats]
    exported_at: datetime

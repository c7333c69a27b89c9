from models.alert import Alert
from models.base import Base
from models.exercise import Exercise
from models.fall import FallDetection
from models.sensor import SensorData
from models.session import ExerciseSession
from models.stats import DailyStats
from models.user import User

__all__ = [
    "Alert",
    "Base",
    "DailyStats",
    "Exercise",
    "ExerciseSession",
    "FallDetection",
    "SensorData",
    "User",
]

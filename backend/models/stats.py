import datetime as dt
import uuid

from sqlalchemy import Boolean, Date, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class DailyStats(Base):
    __tablename__ = "daily_stats"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    # One row per (user_id, date) is enforced by records_service, not by a constraint.
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)

    total_steps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    exercise_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    fall_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_stability: Mapped[float | None] = mapped_column(Float, nullable=True)
    goal_achieved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

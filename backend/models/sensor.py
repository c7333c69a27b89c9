import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class SensorData(Base):
    __tablename__ = "sensor_data"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)

    step_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    flexion_angle: Mapped[float | None] = mapped_column(Float, nullable=True)  # degrees
    extension_angle: Mapped[float | None] = mapped_column(Float, nullable=True)  # degrees
    stability_score: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100
    battery_level: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100
    is_connected: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

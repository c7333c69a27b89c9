import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class FallDetection(Base):
    __tablename__ = "fall_detections"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)

    severity: Mapped[str] = mapped_column(String, nullable=False)  # low | medium | high
    is_confirmed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    response_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    emergency_contacted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

from datetime import datetime

from pydantic import Field

from schemas.common import CamelModel


class SensorDataCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    step_count: int = Field(0, ge=0)
    flexion_angle: float | None = Field(None, ge=0, le=180)
    extension_angle: float | None = Field(None, ge=-30, le=180)
    stability_score: int | None = Field(None, ge=0, le=100)
    battery_level: int | None = Field(None, ge=0, le=100)
    is_connected: bool = True


class SensorData(SensorDataCreate):
    id: str
    timestamp: datetime

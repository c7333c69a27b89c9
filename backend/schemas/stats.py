import datetime as dt

from pydantic import Field

from core.clock import parse_day
from schemas.common import CamelModel, PatchModel


class DailyStatsCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    date: dt.date
    total_steps: int = Field(0, ge=0)
    exercise_minutes: int = Field(0, ge=0)
    fall_count: int = Field(0, ge=0)
    average_stability: float | None = Field(None, ge=0, le=100)
    goal_achieved: bool = False


class DailyStatsRequest(CamelModel):
    """POST body. `date` may be "YYYY-MM-DD" or a full timestamp; only its calendar day is kept."""

    user_id: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    total_steps: int = Field(0, ge=0)
    exercise_minutes: int = Field(0, ge=0)
    fall_count: int = Field(0, ge=0)
    average_stability: float | None = Field(None, ge=0, le=100)
    goal_achieved: bool = False

    def to_create(self, tz_name: str) -> DailyStatsCreate:
        """Raises ValueError when `date` is not a day or an ISO timestamp."""
        fields = self.model_dump(exclude={"date"})
        return DailyStatsCreate(date=parse_day(self.date, tz_name), **fields)


class DailyStats(DailyStatsCreate):
    id: str


class DailyStatsPatch(PatchModel):
    nullable_fields = frozenset({"average_stability"})

    total_steps: int | None = Field(None, ge=0)
    exercise_minutes: int | None = Field(None, ge=0)
    fall_count: int | None = Field(None, ge=0)
    average_stability: float | None = Field(None, ge=0, le=100)
    goal_achieved: bool | None = None

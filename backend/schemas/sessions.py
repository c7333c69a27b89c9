from datetime import datetime

from pydantic import Field

from schemas.common import CamelModel, PatchModel, SessionStatus


class ExerciseSessionCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    exercise_id: str = Field(..., min_length=1)
    end_time: datetime | None = None
    completed_sets: int = Field(0, ge=0)
    completed_reps: int = Field(0, ge=0)
    status: SessionStatus = SessionStatus.PENDING


class ExerciseSession(ExerciseSessionCreate):
    id: str
    start_time: datetime


class ExerciseSessionPatch(PatchModel):
    nullable_fields = frozenset({"end_time"})

    end_time: datetime | None = None
    completed_sets: int | None = Field(None, ge=0)
    completed_reps: int | None = Field(None, ge=0)
    status: SessionStatus | None = None

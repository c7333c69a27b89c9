from pydantic import Field

from schemas.common import CamelModel, ExerciseCategory


class ExerciseCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = Field(..., min_length=1)
    target_sets: int = Field(1, ge=1, le=50)
    target_reps: int = Field(1, ge=1, le=500)
    estimated_minutes: int = Field(10, ge=1, le=240)
    category: ExerciseCategory


class Exercise(ExerciseCreate):
    id: str

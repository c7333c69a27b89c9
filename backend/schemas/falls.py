from datetime import datetime

from pydantic import Field

from schemas.common import CamelModel, FallSeverity, PatchModel


class FallDetectionCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    severity: FallSeverity
    is_confirmed: bool = False
    response_time: int | None = Field(None, ge=0)  # seconds
    location: str | None = None
    emergency_contacted: bool = False


class FallDetection(FallDetectionCreate):
    id: str
    timestamp: datetime


class FallDetectionPatch(PatchModel):
    nullable_fields = frozenset({"response_time", "location"})

    is_confirmed: bool | None = None
    response_time: int | None = Field(None, ge=0)
    location: str | None = None
    emergency_contacted: bool | None = None

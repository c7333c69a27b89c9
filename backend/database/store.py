"""
Record store: one table per entity kind, each with create / get / update / list.

Backends only implement the raw table operations; identity generation and server-assigned
timestamps live here so every backend stamps records the same way.
"""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from core.clock import utcnow
from schemas.alerts import Alert
from schemas.exercises import Exercise
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats
from schemas.users import User

RecordT = TypeVar("RecordT", bound=BaseModel)

Predicate = Callable[[RecordT], bool]

# Never taken from a patch, whatever the caller passes.
IMMUTABLE_FIELDS = frozenset({"id"})


def new_id() -> str:
    return str(uuid.uuid4())


class RecordTable(ABC, Generic[RecordT]):
    def __init__(self, record_cls: type[RecordT], stamp_field: str | None = None):
        self.record_cls = record_cls
        self.stamp_field = stamp_field

    def create(self, data: BaseModel | Mapping[str, Any]) -> RecordT:
        fields = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        fields["id"] = new_id()
        if self.stamp_field:
            fields[self.stamp_field] = utcnow()
        record = self.record_cls.model_validate(fields)
        self.put(record)
        return record

    @abstractmethod
    def put(self, record: RecordT) -> None:
        """Insert a fully formed record as-is."""

    @abstractmethod
    def get(self, record_id: str) -> RecordT | None: ...

    @abstractmethod
    def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        """Shallow merge `changes` over the stored record; None when the id is unknown."""

    @abstractmethod
    def list(self, where: Predicate | None = None, *, user_id: str | None = None) -> list[RecordT]: ...

    @staticmethod
    def _mutable(changes: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}


class RecordStore:
    """The seven entity tables. Construct one per app (or per test) and inject it."""

    users: RecordTable[User]
    sensor_data: RecordTable[SensorData]
    exercises: RecordTable[Exercise]
    exercise_sessions: RecordTable[ExerciseSession]
    fall_detections: RecordTable[FallDetection]
    alerts: RecordTable[Alert]
    daily_stats: RecordTable[DailyStats]

    backend = "abstract"

    def close(self) -> None:
        pass

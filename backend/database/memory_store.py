import threading
from collections.abc import Mapping
from typing import Any

from database.store import Predicate, RecordStore, RecordT, RecordTable
from schemas.alerts import Alert
from schemas.exercises import Exercise
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats
from schemas.users import User


class MemoryTable(RecordTable[RecordT]):
    def __init__(self, record_cls: type[RecordT], stamp_field: str | None = None):
        super().__init__(record_cls, stamp_field)
        # Rows are copied in and out, so callers can only change them through update().
        self._rows: dict[str, RecordT] = {}
        # Each operation is atomic; two patches to one id are still last-write-wins.
        self._lock = threading.Lock()

    def put(self, record: RecordT) -> None:
        with self._lock:
            self._rows[record.id] = record.model_copy()

    def get(self, record_id: str) -> RecordT | None:
        with self._lock:
            row = self._rows.get(record_id)
        return row.model_copy() if row is not None else None

    def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        changes = self._mutable(changes)
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            merged = current.model_copy(update=changes)
            self._rows[record_id] = merged
        return merged.model_copy()

    def list(self, where: Predicate | None = None, *, user_id: str | None = None) -> list[RecordT]:
        with self._lock:
            rows = list(self._rows.values())
        return [
            r.model_copy()
            for r in rows
            if (user_id is None or getattr(r, "user_id", None) == user_id) and (where is None or where(r))
        ]

    def __len__(self) -> int:
        return len(self._rows)


class MemoryStore(RecordStore):
    backend = "memory"

    def __init__(self) -> None:
        self.users = MemoryTable(User)
        self.sensor_data = MemoryTable(SensorData, stamp_field="timestamp")
        self.exercises = MemoryTable(Exercise)
        self.exercise_sessions = MemoryTable(ExerciseSession, stamp_field="start_time")
        self.fall_detections = MemoryTable(FallDetection, stamp_field="timestamp")
        self.alerts = MemoryTable(Alert, stamp_field="timestamp")
        self.daily_stats = MemoryTable(DailyStats)

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

import models
from core.clock import as_utc
from database.session import make_session_factory
from database.store import Predicate, RecordStore, RecordT, RecordTable
from schemas.alerts import Alert
from schemas.exercises import Exercise
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats
from schemas.users import User


class SqlTable(RecordTable[RecordT]):
    """One ORM table. Every operation runs in its own session/transaction."""

    def __init__(
        self,
        session_factory: sessionmaker,
        model: type[models.Base],
        record_cls: type[RecordT],
        stamp_field: str | None = None,
    ):
        super().__init__(record_cls, stamp_field)
        self.session_factory = session_factory
        self.model = model
        self._columns = [attr.key for attr in inspect(model).column_attrs]

    def _to_record(self, row) -> RecordT:
        values = {}
        for key in self._columns:
            value = getattr(row, key)
            # SQLite hands back naive datetimes; everything is stored as UTC.
            values[key] = as_utc(value) if isinstance(value, datetime) else value
        return self.record_cls.model_validate(values)

    def put(self, record: RecordT) -> None:
        with self.session_factory.begin() as db:
            db.add(self.model(**record.model_dump()))

    def get(self, record_id: str) -> RecordT | None:
        with self.session_factory() as db:
            row = db.get(self.model, record_id)
            return self._to_record(row) if row is not None else None

    def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        changes = self._mutable(changes)
        with self.session_factory.begin() as db:
            row = db.get(self.model, record_id)
            if row is None:
                return None
            merged = self._to_record(row).model_copy(update=changes)
            for key, value in merged.model_dump().items():
                setattr(row, key, value)
        return merged

    def list(self, where: Predicate | None = None, *, user_id: str | None = None) -> list[RecordT]:
        stmt = select(self.model)
        if user_id is not None:
            stmt = stmt.where(self.model.user_id == user_id)
        with self.session_factory() as db:
            records = [self._to_record(row) for row in db.scalars(stmt).all()]
        if where is not None:
            records = [r for r in records if where(r)]
        return records


class SqlStore(RecordStore):
    backend = "sql"

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        models.Base.metadata.create_all(bind=engine)
        factory = make_session_factory(engine)

        self.users = SqlTable(factory, models.User, User)
        self.sensor_data = SqlTable(factory, models.SensorData, SensorData, stamp_field="timestamp")
        self.exercises = SqlTable(factory, models.Exercise, Exercise)
        self.exercise_sessions = SqlTable(factory, models.ExerciseSession, ExerciseSession, stamp_field="start_time")
        self.fall_detections = SqlTable(factory, models.FallDetection, FallDetection, stamp_field="timestamp")
        self.alerts = SqlTable(factory, models.Alert, Alert, stamp_field="timestamp")
        self.daily_stats = SqlTable(factory, models.DailyStats, DailyStats)

    def close(self) -> None:
        self.engine.dispose()

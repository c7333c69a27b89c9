from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from database.memory_store import MemoryStore
from database.session import make_engine
from database.sql_store import SqlStore
from database.store import new_id
from main import create_app
from schemas.alerts import Alert
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from services.seed_service import seed_default_exercises


def at(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory", seed_demo_data=False, timezone="UTC")


@pytest.fixture
def store() -> MemoryStore:
    s = MemoryStore()
    seed_default_exercises(s)
    return s


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    if request.param == "memory":
        s = MemoryStore()
    else:
        s = SqlStore(make_engine("sqlite:///:memory:"))
    yield s
    s.close()


@pytest.fixture
def client(settings, store) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))


def put_reading(store, user_id: str, ts: datetime, **fields) -> SensorData:
    reading = SensorData(id=new_id(), user_id=user_id, timestamp=ts, **fields)
    store.sensor_data.put(reading)
    return reading


def put_session(store, user_id: str, start: datetime, **fields) -> ExerciseSession:
    fields.setdefault("exercise_id", "e1")
    session = ExerciseSession(id=new_id(), user_id=user_id, start_time=start, **fields)
    store.exercise_sessions.put(session)
    return session


def put_alert(store, user_id: str, ts: datetime, **fields) -> Alert:
    fields.setdefault("type", "device")
    fields.setdefault("title", "Device synchronized")
    fields.setdefault("message", "Data synchronized successfully")
    alert = Alert(id=new_id(), user_id=user_id, timestamp=ts, **fields)
    store.alerts.put(alert)
    return alert

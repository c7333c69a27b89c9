from datetime import date

from core.clock import utcnow
from core.logger import get_logger
from database.store import RecordStore
from exceptions.errors import ValidationError
from schemas.common import SessionStatus
from schemas.falls import FallDetection, FallDetectionPatch
from schemas.sessions import ExerciseSession, ExerciseSessionCreate, ExerciseSessionPatch
from schemas.stats import DailyStats, DailyStatsCreate, DailyStatsPatch
from schemas.users import User, UserCreate
from services.auth_service import hash_password
from services.query_service import find_daily_stats, get_user_by_username

logger = get_logger("records")

# pending -> in_progress -> completed, pending -> skipped. Terminal states stay put.
SESSION_TRANSITIONS: dict[str, set[str]] = {
    SessionStatus.PENDING.value: {SessionStatus.IN_PROGRESS.value, SessionStatus.SKIPPED.value},
    SessionStatus.IN_PROGRESS.value: {SessionStatus.COMPLETED.value},
    SessionStatus.COMPLETED.value: set(),
    SessionStatus.SKIPPED.value: set(),
}

# A session is opened as planned or already running; terminal states are reached by updates.
STARTABLE_STATUSES = frozenset({SessionStatus.PENDING.value, SessionStatus.IN_PROGRESS.value})


def register_user(store: RecordStore, payload: UserCreate) -> User:
    username = payload.username.strip()
    if get_user_by_username(store, username):
        raise ValidationError("Username already exists")
    user = store.users.create({"username": username, "password": hash_password(payload.password)})
    logger.info(f"Registered user {user.id}")
    return user


def can_transition(current: str, target: str) -> bool:
    return current == target or target in SESSION_TRANSITIONS.get(current, set())


def start_exercise_session(store: RecordStore, payload: ExerciseSessionCreate) -> ExerciseSession:
    if payload.status not in STARTABLE_STATUSES:
        raise ValidationError(f"Cannot start an exercise session as {payload.status}")
    return store.exercise_sessions.create(payload)


def update_exercise_session(store: RecordStore, session_id: str, patch: ExerciseSessionPatch) -> ExerciseSession | None:
    session = store.exercise_sessions.get(session_id)
    if session is None:
        return None

    changes = patch.changes()
    target = changes.get("status")
    if target is not None and not can_transition(session.status, target):
        raise ValidationError(f"Cannot move exercise session from {session.status} to {target}")
    if target == SessionStatus.COMPLETED.value and changes.get("end_time", session.end_time) is None:
        changes["end_time"] = utcnow()

    updated = store.exercise_sessions.update(session_id, changes)
    logger.debug(f"Updated exercise session {session_id}: {sorted(changes)}")
    return updated


def update_fall_detection(store: RecordStore, fall_id: str, patch: FallDetectionPatch) -> FallDetection | None:
    return store.fall_detections.update(fall_id, patch.changes())


def record_daily_stats(store: RecordStore, payload: DailyStatsCreate) -> DailyStats:
    # One row per (user, date): update-by-date must find exactly one match.
    if find_daily_stats(store, payload.user_id, payload.date):
        raise ValidationError(f"Daily stats for {payload.date.isoformat()} already recorded")
    return store.daily_stats.create(payload)


def update_daily_stats(store: RecordStore, user_id: str, day: date, patch: DailyStatsPatch) -> DailyStats | None:
    existing = find_daily_stats(store, user_id, day)
    if existing is None:
        return None
    return store.daily_stats.update(existing.id, patch.changes())

from fastapi import APIRouter

from api.deps import SettingsDep, StoreDep
from core.clock import parse_day
from core.logger import get_logger
from exceptions.errors import NotFoundError, ValidationError, reraise_as_internal
from schemas.sessions import ExerciseSession, ExerciseSessionCreate, ExerciseSessionPatch
from services import query_service
from services.records_service import start_exercise_session, update_exercise_session

logger = get_logger("sessions")

router = APIRouter()


@router.get("/{user_id}", response_model=list[ExerciseSession])
def list_sessions(user_id: str, store: StoreDep, settings: SettingsDep, date: str | None = None):
    day = None
    if date:
        try:
            day = parse_day(date, settings.timezone)
        except ValueError:
            raise ValidationError("Invalid date")
    with reraise_as_internal("Failed to fetch exercise sessions"):
        return query_service.get_exercise_sessions(store, user_id, day=day, tz_name=settings.timezone)


@router.post("", response_model=ExerciseSession)
def start_session(payload: ExerciseSessionCreate, store: StoreDep):
    # exerciseId is a weak reference; it is not checked against the catalog.
    session = start_exercise_session(store, payload)
    logger.info(f"Session {session.id} started for {session.user_id} ({session.status})")
    return session


@router.patch("/{session_id}", response_model=ExerciseSession)
def patch_session(session_id: str, payload: ExerciseSessionPatch, store: StoreDep):
    session = update_exercise_session(store, session_id, payload)
    if not session:
        raise NotFoundError("Exercise session not found")
    return session

from fastapi import APIRouter

from api.deps import StoreDep
from exceptions.errors import NotFoundError, reraise_as_internal
from schemas.exercises import Exercise, ExerciseCreate
from services import query_service

router = APIRouter()


@router.get("", response_model=list[Exercise])
def list_exercises(store: StoreDep):
    with reraise_as_internal("Failed to fetch exercises"):
        return query_service.get_exercises(store)


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(exercise_id: str, store: StoreDep):
    exercise = query_service.get_exercise(store, exercise_id)
    if not exercise:
        raise NotFoundError("Exercise not found")
    return exercise


@router.post("", response_model=Exercise)
def create_exercise(payload: ExerciseCreate, store: StoreDep):
    return store.exercises.create(payload)

from fastapi import APIRouter, Query

from api.deps import StoreDep
from core.logger import get_logger
from exceptions.errors import NotFoundError, reraise_as_internal
from schemas.falls import FallDetection, FallDetectionCreate, FallDetectionPatch
from services import query_service
from services.records_service import update_fall_detection

logger = get_logger("falls")

router = APIRouter()


@router.get("/{user_id}", response_model=list[FallDetection])
def fall_history(user_id: str, store: StoreDep, limit: int = Query(query_service.DEFAULT_FALL_LIMIT, ge=0)):
    with reraise_as_internal("Failed to fetch fall detections"):
        return query_service.get_fall_detections(store, user_id, limit=limit)


@router.post("", response_model=FallDetection)
def record_fall(payload: FallDetectionCreate, store: StoreDep):
    fall = store.fall_detections.create(payload)
    logger.warning(f"Fall {fall.id} ({fall.severity}) recorded for {fall.user_id}")
    return fall


@router.patch("/{fall_id}", response_model=FallDetection)
def patch_fall(fall_id: str, payload: FallDetectionPatch, store: StoreDep):
    fall = update_fall_detection(store, fall_id, payload)
    if not fall:
        raise NotFoundError("Fall detection not found")
    return fall

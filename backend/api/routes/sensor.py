from fastapi import APIRouter, Query

from api.deps import StoreDep
from core.logger import get_logger
from exceptions.errors import reraise_as_internal
from schemas.sensor import SensorData, SensorDataCreate
from services import query_service

logger = get_logger("sensor")

router = APIRouter()


@router.get("/latest/{user_id}", response_model=SensorData | None)
def latest_sensor_data(user_id: str, store: StoreDep):
    with reraise_as_internal("Failed to fetch sensor data"):
        return query_service.get_latest_sensor_data(store, user_id)


@router.get("/{user_id}", response_model=list[SensorData])
def sensor_history(
    user_id: str,
    store: StoreDep,
    limit: int = Query(query_service.DEFAULT_SENSOR_LIMIT, ge=0),
):
    with reraise_as_internal("Failed to fetch sensor history"):
        return query_service.get_sensor_data(store, user_id, limit=limit)


@router.post("", response_model=SensorData)
def record_sensor_data(payload: SensorDataCreate, store: StoreDep):
    reading = store.sensor_data.create(payload)
    logger.debug(f"Sensor reading {reading.id} for {reading.user_id}")
    return reading

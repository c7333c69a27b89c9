from fastapi import APIRouter, Query

from api.deps import StoreDep
from exceptions.errors import NotFoundError, reraise_as_internal
from schemas.alerts import Alert, AlertCreate
from services import query_service

router = APIRouter()


@router.get("/{user_id}", response_model=list[Alert])
def alert_history(user_id: str, store: StoreDep, limit: int = Query(query_service.DEFAULT_ALERT_LIMIT, ge=0)):
    with reraise_as_internal("Failed to fetch alerts"):
        return query_service.get_alerts(store, user_id, limit=limit)


@router.post("", response_model=Alert)
def create_alert(payload: AlertCreate, store: StoreDep):
    return store.alerts.create(payload)


@router.patch("/{alert_id}/read", response_model=Alert)
def read_alert(alert_id: str, store: StoreDep):
    alert = query_service.mark_alert_read(store, alert_id)
    if not alert:
        raise NotFoundError("Alert not found")
    return alert

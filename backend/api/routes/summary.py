from fastapi import APIRouter

from api.deps import SettingsDep, StoreDep
from exceptions.errors import reraise_as_internal
from schemas.summary import DashboardSummary
from services.summary_service import build_dashboard_summary

router = APIRouter()


@router.get("/{user_id}", response_model=DashboardSummary)
def dashboard_summary(user_id: str, store: StoreDep, settings: SettingsDep):
    with reraise_as_internal("Failed to build dashboard summary"):
        return build_dashboard_summary(store, user_id, settings)

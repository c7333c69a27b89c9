from fastapi import APIRouter, Query

from api.deps import SettingsDep, StoreDep
from core.clock import parse_day
from exceptions.errors import NotFoundError, ValidationError, reraise_as_internal
from schemas.stats import DailyStats, DailyStatsPatch, DailyStatsRequest
from services import query_service
from services.records_service import record_daily_stats, update_daily_stats

router = APIRouter()


@router.get("/{user_id}", response_model=list[DailyStats])
def daily_stats(user_id: str, store: StoreDep, days: int = Query(query_service.DEFAULT_STATS_DAYS, ge=0)):
    with reraise_as_internal("Failed to fetch daily stats"):
        return query_service.get_daily_stats(store, user_id, days=days)


@router.post("", response_model=DailyStats)
def create_daily_stats(payload: DailyStatsRequest, store: StoreDep, settings: SettingsDep):
    try:
        stats = payload.to_create(settings.timezone)
    except ValueError:
        raise ValidationError("Invalid date")
    return record_daily_stats(store, stats)


@router.patch("/{user_id}/{date}", response_model=DailyStats)
def patch_daily_stats(user_id: str, date: str, payload: DailyStatsPatch, store: StoreDep, settings: SettingsDep):
    try:
        day = parse_day(date, settings.timezone)
    except ValueError:
        raise ValidationError("Invalid date")
    stats = update_daily_stats(store, user_id, day, payload)
    if not stats:
        raise NotFoundError("Daily stats not found")
    return stats

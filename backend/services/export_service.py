from __future__ import annotations

import csv
import io
from typing import NamedTuple

from core.clock import utcnow
from core.logger import get_logger
from database.store import RecordStore
from schemas.export import ExportSnapshot
from schemas.stats import DailyStats
from services import query_service
from services.report_service import build_report_pdf_bytes

logger = get_logger("export")

EXPORT_STATS_DAYS = 30
CSV_HEADER = ["Date", "Steps", "Exercise Minutes", "Fall Count", "Stability Score", "Goal Achieved"]


class ExportFile(NamedTuple):
    content: bytes
    media_type: str
    filename: str


def build_export_snapshot(store: RecordStore, user_id: str) -> ExportSnapshot:
    # Full histories, except daily stats which stop at the 30 most recent rows.
    return ExportSnapshot(
        user_id=user_id,
        sensor_data=query_service.get_sensor_data(store, user_id, limit=None),
        exercise_sessions=query_service.get_exercise_sessions(store, user_id),
        fall_detections=query_service.get_fall_detections(store, user_id, limit=None),
        alerts=query_service.get_alerts(store, user_id, limit=None),
        daily_stats=query_service.get_daily_stats(store, user_id, days=EXPORT_STATS_DAYS),
        exported_at=utcnow(),
    )


def snapshot_to_json(snapshot: ExportSnapshot) -> bytes:
    return snapshot.model_dump_json(by_alias=True, exclude={"user_id"}).encode("utf-8")


def _number(value: float | int) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def _csv_row(stat: DailyStats) -> list[str]:
    return [
        stat.date.isoformat(),
        str(stat.total_steps),
        str(stat.exercise_minutes),
        str(stat.fall_count),
        _number(stat.average_stability or 0),
        "true" if stat.goal_achieved else "false",
    ]


def daily_stats_to_csv(stats: list[DailyStats]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(_csv_row(s) for s in stats)
    return buf.getvalue()


def render_export(snapshot: ExportSnapshot, fmt: str) -> ExportFile:
    # csv and pdf are explicit; any other value gets the JSON download.
    fmt = (fmt or "json").lower()
    user_id = snapshot.user_id
    if fmt == "csv":
        content = daily_stats_to_csv(snapshot.daily_stats).encode("utf-8")
        return ExportFile(content, "text/csv", f"knee-brace-data-{user_id}.csv")
    if fmt == "pdf":
        return ExportFile(build_report_pdf_bytes(snapshot), "application/pdf", f"knee-brace-report-{user_id}.pdf")
    return ExportFile(snapshot_to_json(snapshot), "application/json", f"knee-brace-data-{user_id}.json")


def export_user_data(store: RecordStore, user_id: str, fmt: str = "json") -> ExportFile:
    snapshot = build_export_snapshot(store, user_id)
    export = render_export(snapshot, fmt)
    logger.info(f"Exported {fmt} for user {user_id} ({len(export.content)} bytes)")
    return export

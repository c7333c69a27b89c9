import json
from datetime import date, timedelta

from conftest import at, put_alert, put_reading, put_session
from schemas.falls import FallDetectionCreate
from schemas.stats import DailyStatsCreate
from services import export_service


def _add_stats(store, user_id: str, days: int):
    start = date(2025, 1, 1)
    for i in range(days):
        store.daily_stats.create(
            DailyStatsCreate(user_id=user_id, date=start + timedelta(days=i), total_steps=1000 + i)
        )


def test_csv_has_header_and_one_row_per_stats_record(store):
    _add_stats(store, "u1", 5)
    lines = export_service.export_user_data(store, "u1", "csv").content.decode().splitlines()
    assert lines[0] == "Date,Steps,Exercise Minutes,Fall Count,Stability Score,Goal Achieved"
    assert len(lines) == 6
    assert lines[1] == "2025-01-05,1004,0,0,0,false"


def test_csv_caps_at_thirty_rows(store):
    _add_stats(store, "u1", 40)
    _add_stats(store, "u2", 3)
    lines = export_service.export_user_data(store, "u1", "csv").content.decode().splitlines()
    assert len(lines) == 31


def test_csv_renders_stability_and_goal(store):
    store.daily_stats.create(
        DailyStatsCreate(user_id="u1", date=date(2025, 2, 1), average_stability=87.5, goal_achieved=True)
    )
    store.daily_stats.create(DailyStatsCreate(user_id="u1", date=date(2025, 2, 2), average_stability=90.0))
    lines = export_service.export_user_data(store, "u1", "csv").content.decode().splitlines()
    assert lines[1].endswith(",90,false")
    assert lines[2].endswith(",87.5,true")


def test_json_snapshot_contains_full_histories(store):
    for i in range(60):
        put_reading(store, "u1", at(2025, 3, 1) + timedelta(minutes=i))
    for i in range(25):
        put_alert(store, "u1", at(2025, 3, 1) + timedelta(minutes=i))
        store.fall_detections.create(FallDetectionCreate(user_id="u1", severity="low"))
    put_session(store, "u1", at(2025, 3, 1))
    _add_stats(store, "u1", 35)

    export = export_service.export_user_data(store, "u1", "json")
    assert export.media_type == "application/json"
    assert export.filename == "knee-brace-data-u1.json"

    body = json.loads(export.content)
    assert set(body) == {"sensorData", "exerciseSessions", "fallDetections", "alerts", "dailyStats", "exportedAt"}
    assert len(body["sensorData"]) == 60
    assert len(body["alerts"]) == 25
    assert len(body["fallDetections"]) == 25
    assert len(body["exerciseSessions"]) == 1
    assert len(body["dailyStats"]) == 30
    assert body["sensorData"][0]["userId"] == "u1"


def test_pdf_report(store):
    _add_stats(store, "u1", 3)
    store.fall_detections.create(FallDetectionCreate(user_id="u1", severity="high", location="Stairs"))
    export = export_service.export_user_data(store, "u1", "pdf")
    assert export.media_type == "application/pdf"
    assert export.filename == "knee-brace-report-u1.pdf"
    assert export.content.startswith(b"%PDF")


def test_pdf_report_spans_pages_for_long_histories(store):
    _add_stats(store, "u1", 30)
    for _ in range(20):
        store.fall_detections.create(FallDetectionCreate(user_id="u1", severity="low"))
    assert export_service.export_user_data(store, "u1", "pdf").content.startswith(b"%PDF")


def test_unknown_format_falls_back_to_json(store):
    store.daily_stats.create(DailyStatsCreate(user_id="u1", date=date(2025, 2, 1), total_steps=4321))
    export = export_service.export_user_data(store, "u1", "xml")
    assert export.media_type == "application/json"
    assert export.filename == "knee-brace-data-u1.json"
    assert json.loads(export.content)["dailyStats"][0]["totalSteps"] == 4321


def test_export_for_user_without_data(store):
    body = json.loads(export_service.export_user_data(store, "nobody").content)
    assert body["sensorData"] == [] and body["dailyStats"] == []
    lines = export_service.export_user_data(store, "nobody", "csv").content.decode().splitlines()
    assert len(lines) == 1

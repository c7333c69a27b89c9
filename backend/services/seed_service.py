"""
Default exercise catalog plus an optional synthetic history for a demo user.

Synthetic records go through the same store tables as real ones, so the query layer, the
summary and the exports cannot tell them apart.
"""

import random
from datetime import timedelta

from core.clock import today, utcnow
from core.config import Settings
from core.logger import get_logger
from database.store import RecordStore, new_id
from schemas.alerts import Alert
from schemas.exercises import Exercise, ExerciseCreate
from schemas.falls import FallDetection
from schemas.sensor import SensorData
from schemas.sessions import ExerciseSession
from schemas.stats import DailyStats

logger = get_logger("seed")

DEFAULT_EXERCISES = [
    ExerciseCreate(
        name="Leg Extensions",
        description="3 sets of 15 repetitions",
        target_sets=3,
        target_reps=15,
        estimated_minutes=15,
        category="strength",
    ),
    ExerciseCreate(
        name="Range of Motion",
        description="Slow flexion and extension",
        target_sets=2,
        target_reps=10,
        estimated_minutes=10,
        category="flexibility",
    ),
    ExerciseCreate(
        name="Balance Training",
        description="Single leg stands - 30 seconds each",
        target_sets=3,
        target_reps=1,
        estimated_minutes=10,
        category="balance",
    ),
]

ALERT_TEMPLATES = {
    "exercise": ("Exercise completed", "Great job on your workout!", "success"),
    "goal": ("Daily target reached", "You hit your step goal!", "success"),
    "battery": ("Battery low", "Device battery below 20%", "warning"),
    "device": ("Device synchronized", "Data synchronized successfully", "info"),
    "fall": ("Fall detected", "Potential fall detected", "error"),
}

FALL_LOCATIONS = ["Living Room", "Bathroom", "Kitchen", "Bedroom", "Stairs"]


def seed_default_exercises(store: RecordStore) -> list[Exercise]:
    existing = store.exercises.list()
    if existing:
        return existing
    return [store.exercises.create(e) for e in DEFAULT_EXERCISES]


def seed_demo_data(store: RecordStore, settings: Settings) -> None:
    user_id = settings.demo_user_id
    if store.daily_stats.list(user_id=user_id):
        return

    rng = random.Random(settings.demo_seed)
    now = utcnow()
    last_day = today(settings.timezone)

    for i in range(settings.demo_days):
        steps = rng.randint(5000, 10000)
        minutes = rng.randint(15, 75)
        store.daily_stats.put(
            DailyStats(
                id=new_id(),
                user_id=user_id,
                date=last_day - timedelta(days=i),
                total_steps=steps,
                exercise_minutes=minutes,
                fall_count=1 if rng.random() < 0.05 else 0,
                average_stability=round(rng.uniform(75, 95), 1),
                goal_achieved=steps >= 8000 and minutes >= 30,
            )
        )

    # One reading every 4 hours over the last week, battery draining towards now.
    readings = 42
    for i in range(readings):
        store.sensor_data.put(
            SensorData(
                id=new_id(),
                user_id=user_id,
                timestamp=now - timedelta(hours=4 * (readings - 1 - i)),
                step_count=rng.randint(1000, 2000),
                flexion_angle=round(rng.uniform(65, 110), 1),
                extension_angle=round(rng.uniform(5, 20), 1),
                stability_score=rng.randint(80, 100),
                battery_level=max(20, 100 - (readings - 1 - i) * 2),
                is_connected=True,
            )
        )

    exercises = seed_default_exercises(store)
    statuses = ["completed", "in_progress", "pending"]
    for offset, (exercise, status) in enumerate(zip(exercises, statuses)):
        done = status == "completed"
        start = now - timedelta(minutes=30 * (len(exercises) - offset))
        store.exercise_sessions.put(
            ExerciseSession(
                id=new_id(),
                user_id=user_id,
                exercise_id=exercise.id,
                start_time=start,
                end_time=start + timedelta(minutes=exercise.estimated_minutes) if done else None,
                completed_sets=exercise.target_sets if done else 0,
                completed_reps=exercise.target_reps if done else 0,
                status=status,
            )
        )

    for _ in range(3):
        store.fall_detections.put(
            FallDetection(
                id=new_id(),
                user_id=user_id,
                timestamp=now - timedelta(days=rng.randint(1, settings.demo_days)),
                severity=rng.choice(["low", "medium", "high"]),
                is_confirmed=rng.random() < 0.7,
                response_time=rng.randint(5, 65),
                location=rng.choice(FALL_LOCATIONS),
                emergency_contacted=rng.random() < 0.2,
            )
        )

    for i in range(10):
        alert_type = rng.choice(sorted(ALERT_TEMPLATES))
        title, message, severity = ALERT_TEMPLATES[alert_type]
        store.alerts.put(
            Alert(
                id=new_id(),
                user_id=user_id,
                type=alert_type,
                title=title,
                message=message,
                severity=severity,
                timestamp=now - timedelta(hours=2 * i),
                is_read=rng.random() < 0.6,
            )
        )

    logger.info(f"Seeded {settings.demo_days} days of synthetic data for {user_id}")


def init_store(store: RecordStore, settings: Settings) -> RecordStore:
    seed_default_exercises(store)
    if settings.seed_demo_data:
        seed_demo_data(store, settings)
    return store

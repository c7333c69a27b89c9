from core.config import Settings
from database.memory_store import MemoryStore
from services import query_service
from services.seed_service import init_store, seed_default_exercises


def _demo_settings(**overrides) -> Settings:
    return Settings(_env_file=None, seed_demo_data=True, demo_user_id="demo", demo_days=14, **overrides)


def test_default_exercises_seeded_once():
    store = MemoryStore()
    seed_default_exercises(store)
    seed_default_exercises(store)
    categories = sorted(e.category for e in store.exercises.list())
    assert categories == ["balance", "flexibility", "strength"]


def test_init_store_without_demo_data_only_has_catalog():
    store = init_store(MemoryStore(), Settings(_env_file=None, seed_demo_data=False))
    assert len(store.exercises.list()) == 3
    assert store.sensor_data.list() == []


def test_demo_data_is_served_by_the_query_layer():
    store = init_store(MemoryStore(), _demo_settings())
    assert len(query_service.get_daily_stats(store, "demo", days=None)) == 14
    assert query_service.get_latest_sensor_data(store, "demo").battery_level == 100
    assert len(query_service.get_sensor_data(store, "demo", limit=None)) == 42
    assert len(query_service.get_alerts(store, "demo")) == 10
    assert {s.status for s in query_service.get_exercise_sessions(store, "demo")} == {
        "completed",
        "in_progress",
        "pending",
    }


def test_demo_data_is_deterministic_and_idempotent():
    first = init_store(MemoryStore(), _demo_settings())
    second = init_store(MemoryStore(), _demo_settings())
    steps = lambda s: [d.total_steps for d in query_service.get_daily_stats(s, "demo", days=None)]  # noqa: E731
    assert steps(first) == steps(second)

    init_store(first, _demo_settings())
    assert len(first.daily_stats.list()) == 14

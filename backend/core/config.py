from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Knee Brace Dashboard"
    env: str = "dev"
    api_prefix: str = "/api"

    frontend_origin: str = "http://localhost:5173"

    # "memory" keeps records for the process lifetime only.
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///:memory:"

    # Calendar-day comparisons (session day filter, "today" in the summary) use this zone.
    timezone: str = "UTC"

    seed_demo_data: bool = False
    demo_user_id: str = "demo-user"
    demo_seed: int = 42
    demo_days: int = 30

    default_exercise_goal_minutes: int = 45

    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False


settings = Settings()

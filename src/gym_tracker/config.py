"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path.home() / ".gym-tracker"


class Settings(BaseSettings):
    """Settings read from ``GYM_TRACKER_*`` environment variables or ``.env``."""

    data_dir: Path = DATA_DIR
    storage_slot: str = "gym_tracker_workouts"
    log_level: str = "WARNING"

    # Analysis
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GYM_TRACKER_GEMINI_API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"
    analysis_history_limit: int = 10

    model_config = SettingsConfigDict(
        env_prefix="GYM_TRACKER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()

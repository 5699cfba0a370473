"""Configuration settings for the fitness planner."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/fitness_planner/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_PLANNER_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    db_path: Path | None = None

    # Logging
    log_level: str = "INFO"

    # Rolling window used when loading workout history for recommendations
    history_window_days: int = 28

    def model_post_init(self, __context) -> None:
        """Set default database path after initialization."""
        if self.db_path is None:
            self.db_path = PROJECT_ROOT / "fitness_planner.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Record Manager"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Registry behaviour
    registry_thread_safe: bool = False     # guard each storage operation with a lock

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                # Root / app-wide
    log_level_registry: str = "INFO"       # Contact/Task/Appointment services
    log_level_storage: str = "WARNING"     # In-memory repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

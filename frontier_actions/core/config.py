from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings.

    Every value can be overridden with a ``FRONTIER_`` prefixed environment
    variable or from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRONTIER_",
        env_file=".env",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./frontier.db"
    echo_sql: bool = False

    # Pagination
    per_page: int = Field(default=15, ge=1)

    # Scaffolding
    base_path: str = "."
    actions_path: str = "app/actions"
    actions_namespace: str = "app.actions"
    stub_path: str | None = None

    # Modules
    modules_enabled: bool = True
    modules_directory: str = "app-modules"
    modules_namespace: str = "modules"
    modules_entry_point_group: str = "frontier.modules"

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

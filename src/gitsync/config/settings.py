"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GITSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"
    json_logs: bool = False

    # Configuration file
    config_file: str = ".gitsync.json"

    # Overrides baseDir from the config file, e.g. for an isolated cache root
    base_dir: str | None = None

    # Git
    git_executable: str = "git"
    git_timeout: float | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

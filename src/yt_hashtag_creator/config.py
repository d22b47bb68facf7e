"""Runtime settings loaded from the environment and .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_MAX_HASHTAGS


class Settings(BaseSettings):
    """CLI and logging settings.

    Every field can be set with a YT_HASHTAG_ prefixed environment
    variable, e.g. YT_HASHTAG_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="YT_HASHTAG_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_to_file: bool = True

    # Defaults for CLI options
    default_niche: str = "other"
    default_content_style: str = "tutorial"
    default_max_hashtags: int = Field(default=DEFAULT_MAX_HASHTAGS, ge=1)
    prioritize_trending: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()

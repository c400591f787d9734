"""
Typed settings for the NBA birthday-games scraper.

Uses Pydantic Settings to load configuration from environment variables
with validation and type safety. A local .env file is read when present.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validate_env import validate_env


class ScraperConfig(BaseModel):
    base_url: str = Field(default="https://www.basketball-reference.com")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        )
    )
    request_timeout_seconds: int = 20
    # basketball-reference.com answers 429 past 30 requests in an hour
    max_requests_per_window: int = 30
    cooldown_minutes: int = 61
    cooldown_notice_minutes: int = 10
    # Worker pool size for per-team roster fetches and index builds
    max_concurrency: int = 4

    @field_validator("max_requests_per_window", "cooldown_minutes", "cooldown_notice_minutes", "max_concurrency")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nested scraper settings can be set with double-underscore syntax
    (SCRAPER_CONFIG__COOLDOWN_MINUTES=5) or, for the common cases, with the
    flat SCRAPER_BASE_URL / SCRAPER_MAX_CONCURRENCY overrides.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str | None = Field(None, alias="LOG_LEVEL")
    # Directory holding the Season<season>/ trees
    data_root: Path = Field(Path("."), alias="DATA_ROOT")
    scraper_config: ScraperConfig = Field(default_factory=ScraperConfig)
    scraper_base_url_override: str | None = Field(None, alias="SCRAPER_BASE_URL")
    scraper_max_concurrency_override: int | None = Field(None, alias="SCRAPER_MAX_CONCURRENCY")

    @model_validator(mode="after")
    def _apply_scraper_overrides(self) -> "Settings":
        """
        Allow top-level env vars (SCRAPER_BASE_URL / SCRAPER_MAX_CONCURRENCY)
        to override the nested scraper config without double-underscore syntax.
        """
        if self.scraper_base_url_override:
            self.scraper_config.base_url = self.scraper_base_url_override.rstrip("/")
        if self.scraper_max_concurrency_override is not None:
            self.scraper_config.max_concurrency = max(1, self.scraper_max_concurrency_override)
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Settings are cached to avoid re-parsing environment variables
    on every access.
    """
    validate_env()
    return Settings()


# Global settings instance - import this in other modules
settings = get_settings()

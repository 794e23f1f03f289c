"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    # Which audit engine backs the adapters
    audit_engine: Literal["lighthouse", "pagespeed"] = "lighthouse"

    # Lighthouse CLI
    lighthouse_path: str = "lighthouse"
    lighthouse_chrome_flags: list[str] = Field(
        default_factory=lambda: ["--headless=new", "--no-sandbox", "--disable-gpu"]
    )
    lighthouse_timeout_seconds: float = 120.0

    # PageSpeed Insights
    pagespeed_api_key: str | None = None
    pagespeed_api_url: str = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
    pagespeed_strategy: Literal["mobile", "desktop"] = "mobile"
    pagespeed_timeout_seconds: float = 90.0

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

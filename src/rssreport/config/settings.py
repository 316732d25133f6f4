"""Configuration management using pydantic-settings.

Supports environment variables (prefixed with RSSREPORT_) and .env file loading.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RSSREPORT_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "rssreport"
    log_level: str = "INFO"
    log_json: bool = False  # Set True for machine-readable logs

    # Output
    output_dir: Path = Field(
        default=Path("output"),
        description="Directory receiving the index page and per-feed tables",
    )
    index_title: str = Field(
        default="RSS Aggregator",
        description="Index page title used when the feed list has none",
    )

    # Fetching
    fetch_timeout: int = Field(default=30, ge=1, description="HTTP timeout in seconds")
    user_agent: str = "rssreport/0.1 (RSS to HTML)"
    follow_redirects: bool = True


# Global singleton instance
settings = Settings()

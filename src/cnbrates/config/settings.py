# src/cnbrates/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.

Files that USE this module:
- cnbrates.app (loads settings for logging and server startup)
- cnbrates.adapters.providers.cnb (feed URL and HTTP timeout)
- cnbrates.adapters.web.* (cache header max-age, listen host and port)

Files that this module USES:
- cnbrates.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from cnbrates.shared.validators import validate_host, validate_http_url

DEFAULT_CNB_DAILY_URL = (
    "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
    "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Upstream feed ---
    cnb_daily_url: str = Field(default=DEFAULT_CNB_DAILY_URL, alias="CNB_DAILY_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    cache_max_age_seconds: int = Field(default=300, alias="CACHE_MAX_AGE_SECONDS", ge=0, le=86400)

    # --- Server ---
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=3003, alias="PORT", ge=1, le=65535)

    # --- Logging (for server deployment) ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="CNBRATES_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("cnb_daily_url")
    @classmethod
    def validate_cnb_daily_url(cls, v: str) -> str:
        """Validate the upstream feed URL."""
        if not validate_http_url(v):
            raise ValueError("CNB_DAILY_URL must be an http(s) URL")
        return v.strip()

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate listen host."""
        if not validate_host(v):
            raise ValueError("Invalid HOST value")
        return v


# Global settings instance
settings = Settings()


# ============================================================================
# Deployment Instructions
# ============================================================================
#
# 1. Run the server in the background:
#    CNB_DAILY_URL=... PORT=3003 nohup python -m cnbrates serve > cnbrates.log 2>&1 &
#
# 2. Check it is up:
#    curl http://localhost:3003/health
#
# 3. Print today's rates without starting the server:
#    python -m cnbrates rates --convert 1000 --code USD
#
# ============================================================================

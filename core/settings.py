"""
Centralized Settings Configuration

Uses Pydantic Settings to load configuration from environment variables
with validation and type coercion. Only the I/O collaborators and the
surrounding application read these values; the scoring transformers take
no configuration.
"""

from typing import Optional

import pytz
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Name source (GET)
    source_url: str = ""
    source_auth: SecretStr = SecretStr("")
    source_file: str = "first_names"
    source_extension: str = "txt"

    # Score sink (POST)
    target_url: str = ""
    target_auth: SecretStr = SecretStr("")
    subject_name: str = "Your Name"
    test_mode: bool = False

    # HTTP
    http_timeout: int = 30

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"
    service_name: str = "name-score-platform"

    # Run timestamps
    timezone: str = "US/Central"

    # Pipeline trigger auth
    pipeline_api_token: Optional[SecretStr] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or console."""
        lower_v = v.lower()
        if lower_v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return lower_v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone is known to pytz."""
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("http_timeout")
    @classmethod
    def validate_http_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("http_timeout must be positive")
        return v


def get_settings() -> Settings:
    """
    Get application settings.

    This function creates a new Settings instance each time,
    allowing for testing with different configurations.
    """
    return Settings()

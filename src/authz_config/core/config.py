"""Configuration management for authz-config.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings are read once and cached.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENCRYPTION_KEY = "change-me-in-production-use-openssl-rand-hex-32"


class Settings(BaseSettings):
    """Package configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTHZ_CONFIG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "authz-config"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Secure Property Settings
    encryption_key: str = Field(
        default=DEFAULT_ENCRYPTION_KEY,
        description="Secret key used to encrypt secure configuration property values",
    )
    secure_value_mask: str = "****"

    # Name Validation Settings
    name_max_length: int = Field(
        default=255,
        description="Maximum length of role names and auth config ids",
    )

    @field_validator("name_max_length")
    @classmethod
    def validate_name_max_length(cls, v: int) -> int:
        """Reject non-positive name lengths."""
        if v < 1:
            raise ValueError("name_max_length must be a positive integer")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()

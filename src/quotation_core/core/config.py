# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

from beartype import beartype
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with immutable configuration."""

    model_config = SettingsConfigDict(
        env_prefix="QUOTATION_",
        env_file=None,
        env_file_encoding="utf-8",
        frozen=True,
        validate_default=True,
        extra="forbid",
    )

    app_name: str = Field(
        default="Quotation Core",
        description="Application name",
        min_length=1,
    )
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the calling layers",
    )
    max_insurable_age: int = Field(
        default=120,
        ge=1,
        le=150,
        description="Oldest age accepted for a date of birth",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    @beartype
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    global _settings
    _settings = None

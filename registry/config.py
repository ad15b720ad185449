"""
Registry Configuration Module

Centralized configuration for the registry using Pydantic Settings.
Supports REGISTRY_* environment variables, .env files, and runtime overrides.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Registry-wide configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    debug: bool = Field(default=False, description="Log at DEBUG level regardless of log_level")

    # Registry
    university_name: str = Field(
        default="University", min_length=1, description="Default university name"
    )
    first_person_id: int = Field(
        default=1, ge=1, description="First identifier issued to a person"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Registry settings singleton
    """
    return Settings()

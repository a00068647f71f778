"""
Configuration settings for EDM Graph.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from src.utils.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DEPTH,
    EDM_NAMESPACE,
)


class EdmSettings(BaseSettings):
    """EDM extraction and path search configuration."""

    model_config = SettingsConfigDict(env_prefix="EDM_")

    namespace: str = Field(
        default=EDM_NAMESPACE, description="XML namespace of EDM schema elements"
    )
    default_max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH, ge=0, description="Hop budget used when none is given"
    )
    json_indent: int = Field(
        default=DEFAULT_JSON_INDENT, ge=0, description="Indentation of JSON output"
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="EDM Graph", description="Application name")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    # Sub-configurations
    edm: EdmSettings = Field(default_factory=EdmSettings)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

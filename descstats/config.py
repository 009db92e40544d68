"""Configuration management for descstats.

Uses pydantic-settings for type-safe environment variable loading.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from DESCSTATS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DESCSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )

    # Report rendering
    display_precision: int | None = Field(
        default=None,
        ge=1,
        le=17,
        description="Significant digits in formatted reports (None = full precision)",
    )

    # Aliasing
    preserve_input_order: bool = Field(
        default=False,
        description="Compute on a private copy so callers' collections are not reordered",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings

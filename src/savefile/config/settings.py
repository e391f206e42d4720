"""Pydantic Settings for savefile configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from savefile.models import DEFAULT_PATTERN


class Settings(BaseSettings):
    """Application settings with support for env vars and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="SAVEFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Naming defaults
    output_dir: Path = Field(default_factory=lambda: Path("/tmp/savefile"))
    pattern: str = DEFAULT_PATTERN
    counter_start: int = Field(default=1, ge=0)
    counter_padding: int = Field(default=3, ge=0)

    # Write behaviour
    create_folders: bool = True
    overwrite: bool = False

    # Allocation limits
    max_attempts: int = Field(default=10000, ge=1, description="Counters skipped during discovery")
    max_retries: int = Field(default=100, ge=1, description="Exclusive-create attempts")


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None

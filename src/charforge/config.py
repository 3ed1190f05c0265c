"""Configuration management for charforge using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CHARFORGE_",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format (console or json)"
    )

    # Skill catalog display
    placeholder_dice: int = Field(
        default=0, ge=0, description="Dice stamped on skills built without a character"
    )
    placeholder_threshold: int = Field(
        default=0, ge=0, description="Threshold stamped on skills built without a character"
    )
    die_label: str = Field(default="d10", description="Die suffix used in roll strings")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

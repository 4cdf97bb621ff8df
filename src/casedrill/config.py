"""
Configuration settings for casedrill.

Uses Pydantic Settings for environment variable management with .env file support.
Only ambient settings live here; the word bank and case styles are fixed.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from CASEDRILL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CASEDRILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None disables logging while the screen is in use)",
    )

    # ========================================
    # Challenges
    # ========================================
    seed: int | None = Field(
        default=None,
        description="Seed for the challenge RNG (None for a fresh run each time)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

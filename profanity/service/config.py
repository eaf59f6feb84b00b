# profanity/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from profanity.core.definitions import FilterTarget, ReplacementStrategy


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'PROFANITY_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROFANITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Lexicons
    lexicon_manifest: Optional[Path] = Field(
        default=None,
        description="Path to a lexicon manifest. Defaults to the bundled lexicons.",
    )

    pattern_cache_ttl_seconds: float = Field(
        default=3600.0,
        ge=0.0,
        description="Lifetime of a compiled source pattern. 0 disables expiry.",
    )

    pattern_cache_max_entries: int = Field(
        default=1024,
        ge=0,
        description="Most compiled source patterns kept at once. 0 means unbounded.",
    )

    # Filter defaults
    default_strategy: ReplacementStrategy = Field(
        default=ReplacementStrategy.ASTERISK,
        description="Replacement strategy used when the caller passes no options.",
    )

    default_target: FilterTarget = Field(
        default=FilterTarget.BODY,
        description="Filter target used when the caller passes no options.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("lexicon_manifest")
    @classmethod
    def validate_manifest(cls, v: Optional[Path]) -> Optional[Path]:
        """Ensure a configured manifest exists."""
        if v is not None and not v.is_file():
            raise ValueError(f"Lexicon manifest not found: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Singleton settings instance
settings = Settings()

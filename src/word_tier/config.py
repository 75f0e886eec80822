"""Configuration management for Word Tier."""

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Remote services
    frequency_api_url: str = Field(
        default="https://api.datamuse.com/words",
        alias="WORD_TIER_FREQUENCY_URL",
    )
    definition_api_url: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries/en",
        alias="WORD_TIER_DEFINITION_URL",
    )

    # Transport settings
    request_timeout: float = Field(
        default=10.0,
        alias="WORD_TIER_TIMEOUT",
    )
    max_retries: int = Field(
        default=2,
        ge=1,
        alias="WORD_TIER_MAX_RETRIES",
    )

    # Tier boundaries, in occurrences per million words
    easy_threshold: float = Field(
        default=4.0,
        alias="WORD_TIER_EASY_ABOVE",
    )
    medium_threshold: float = Field(
        default=2.5,
        alias="WORD_TIER_MEDIUM_FROM",
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> "Settings":
        if self.medium_threshold > self.easy_threshold:
            raise ValueError(
                "WORD_TIER_MEDIUM_FROM must not exceed WORD_TIER_EASY_ABOVE"
            )
        return self


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings

"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority)
2. .env file (for local development fallback)
3. Defaults declared below
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VocabularyParseMode = Literal["tolerant", "strict"]


class Settings(BaseSettings):
    """Application settings for the language practice client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Collaborator service
    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 60.0  # question generation and enhancement can be slow
    health_check_timeout: float = 5.0

    # Response parsing
    vocabulary_parse_mode: VocabularyParseMode = "tolerant"

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths are appended with a leading slash."""
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()

"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from release_meta.policy import (
    DEFAULT_STOP_CHARS,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    ExtractionPolicy,
)


class Settings(BaseSettings):
    """Environment-driven configuration with sensible defaults."""

    log_level: str = Field(default="info", alias="LOG_LEVEL")
    metrics_enabled: bool = Field(default=True, alias="METRICS_ENABLED")
    release_year_min: int = Field(default=DEFAULT_YEAR_MIN, alias="RELEASE_YEAR_MIN")
    release_year_max: int = Field(default=DEFAULT_YEAR_MAX, alias="RELEASE_YEAR_MAX")
    author_stop_chars: str = Field(default=DEFAULT_STOP_CHARS, alias="AUTHOR_STOP_CHARS")
    parser_version: str = Field(default="0.1.0", alias="PARSER_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_policy(self) -> Settings:
        # ExtractionPolicy raises ValueError, reported as a ValidationError.
        _ = self.policy
        return self

    @property
    def policy(self) -> ExtractionPolicy:
        return ExtractionPolicy(
            year_min=self.release_year_min,
            year_max=self.release_year_max,
            stop_chars=self.author_stop_chars,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()

"""Library configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``INGREDIENT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INGREDIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    # Parsing
    verbose_errors: bool = True  # include the grammar trace in syntax errors
    strict_fractions: bool = False  # unknown vulgar fractions are errors, not 0.0
    keep_estimates: bool = False  # flag "about" amounts as approximate

    # Rendering
    color: Literal["auto", "always", "never"] = "auto"

    @property
    def json_logs(self) -> bool:
        """Check if logs should be emitted as JSON."""
        return self.log_format == "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

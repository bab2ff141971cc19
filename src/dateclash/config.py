"""
Application settings.

Values come from the environment (prefix ``DATECLASH_``) or a local ``.env``
file. Fixed business constants (rain threshold, confidence thresholds, ...)
live next to the code that uses them, not here.

Usage::

    from dateclash.config import get_settings

    settings = get_settings()
    print(settings.proxy_hubs)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from dateclash.errors import ConfigurationError


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DATECLASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "dateclash"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")

    # Calendarific has no free anonymous tier; holidays cannot be fetched without it.
    calendarific_api_key: SecretStr | None = None

    # Country codes whose holidays approximate worldwide cultural reach.
    proxy_hubs: frozenset[str] = Field(default=frozenset({"IL", "AE", "CN"}))

    # Extra days analysed on each side of the requested range.
    analysis_padding_days: int = Field(default=0, ge=0)

    def require_calendarific_key(self) -> str:
        """Return the Calendarific key or fail loudly."""
        if self.calendarific_api_key is None or not self.calendarific_api_key.get_secret_value():
            msg = "Missing DATECLASH_CALENDARIFIC_API_KEY; public holidays cannot be fetched."
            raise ConfigurationError(msg)
        return self.calendarific_api_key.get_secret_value()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()

"""Runtime settings, read from ENVKEY_* environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """Defaults for the envkey command; CLI flags take precedence."""

    # The managed .env file is edited, never used as a settings source
    model_config = SettingsConfigDict(env_prefix="ENVKEY_", extra="ignore")

    env_path: Path = Path(".env")
    max_attempts: int = Field(default=3, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings()

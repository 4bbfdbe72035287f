"""Application settings and configuration management."""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    DB_PATH: str = Field(default="data/interviews.db")
    CATALOG_PATH: Optional[str] = None
    SEED_DEMO_DATA: bool = False

    SEARCH_DEBOUNCE_MS: int = Field(default=300, ge=0)
    DEFAULT_DURATION_MINUTES: int = Field(default=60, gt=0)
    EXPORT_DELIMITER: str = Field(default=",", min_length=1, max_length=1)

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()

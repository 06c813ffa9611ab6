"""
uow_coordinator.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the database adapter and logging.
- Offer a cached settings instance for callers that wire the coordinator once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UOW_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "uow-coordinator"
    log_level: str = "INFO"

    # Persistence
    database_url: str = Field(default="sqlite+aiosqlite:///./uow.db", repr=False)
    pool_pre_ping: bool = True

    # Upper bound (seconds) for acquiring a transaction; None waits indefinitely.
    begin_timeout: float | None = Field(default=None, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The database URL is hidden from repr because it commonly embeds credentials.

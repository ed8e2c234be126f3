"""
data_exporter.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All values come from `DX_*` environment variables; defaults target local dev.
    """

    model_config = SettingsConfigDict(env_prefix="DX_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "data-exporter"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence. The default is a process-local in-memory database.
    database_url: str = "sqlite+aiosqlite:///:memory:"
    # Sample policies/notes are only written when explicitly requested.
    seed_sample_data: bool = False

    # Policies
    start_date_window_years: int = Field(default=10, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()

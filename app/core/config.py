from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    monitor_source: Literal["api", "database"] = "api"
    monitors_api_url: str = "http://localhost:5000"
    database_url: str | None = None
    request_timeout_sec: float = Field(default=5.0, gt=0)
    poll_interval_sec: float = Field(default=10.0, gt=0)
    retention_days: int = Field(default=6, ge=1)
    compact_window_minutes: int = Field(default=20, ge=1)
    # offered chart ranges; e.g. {"24h": 1440, "48h": 2880, "72h": 4320}
    window_ranges: dict[str, int] = Field(default_factory=lambda: {"20m": 20, "1h": 60, "3h": 180})
    events_page_size: int = Field(default=5, ge=1)
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"

    # ENV-only configuration
    model_config = SettingsConfigDict(env_prefix="")


settings = Settings()

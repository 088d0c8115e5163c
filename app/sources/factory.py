from __future__ import annotations

from app.core.config import Settings
from app.db.session import get_session_factory
from app.sources.api import ApiMonitorSource
from app.sources.base import MonitorSource
from app.sources.database import DatabaseMonitorSource


def build_monitor_source(config: Settings) -> MonitorSource:
    if config.monitor_source == "database":
        if not config.database_url:
            raise RuntimeError("DATABASE_URL is not set")
        return DatabaseMonitorSource(get_session_factory(config.database_url))
    return ApiMonitorSource(config.monitors_api_url, timeout_sec=config.request_timeout_sec)

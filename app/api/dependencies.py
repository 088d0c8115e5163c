from __future__ import annotations

from datetime import datetime
from functools import lru_cache

from fastapi import Depends, HTTPException, status

from app.core.config import settings
from app.core.models import Monitor
from app.services.window import utc_now
from app.sources.base import MonitorSource
from app.sources.factory import build_monitor_source


@lru_cache(maxsize=1)
def get_monitor_source() -> MonitorSource:
    return build_monitor_source(settings)


def get_now() -> datetime:
    # sampled once per request and threaded through every computation
    return utc_now()


async def get_monitor_or_404(
    monitor_id: str,
    source: MonitorSource = Depends(get_monitor_source),
) -> Monitor:
    monitor = await source.get_monitor(monitor_id)
    if monitor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Monitor not found")
    return monitor

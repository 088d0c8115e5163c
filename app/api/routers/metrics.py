from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_monitor_or_404, get_now
from app.api.schemas.metrics import UptimeRead
from app.core.config import settings
from app.core.models import Monitor
from app.services.metrics import uptime_summary
from app.services.window import resolve_window

router = APIRouter(prefix="/monitors", tags=["metrics"])


@router.get("/{monitor_id}/uptime", response_model=UptimeRead)
async def get_uptime_metrics(
    minutes: float = Query(settings.compact_window_minutes),
    monitor: Monitor = Depends(get_monitor_or_404),
    now: datetime = Depends(get_now),
) -> UptimeRead:
    summary = uptime_summary(monitor.history, resolve_window(minutes, now))
    return UptimeRead(
        monitor_id=monitor.id,
        minutes=minutes,
        uptime_ms=summary.uptime_ms,
        downtime_ms=summary.downtime_ms,
        availability=summary.availability,
        sample_count=summary.sample_count,
        from_ts=summary.from_ts,
        to_ts=summary.to_ts,
    )

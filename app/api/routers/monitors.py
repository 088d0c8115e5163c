from __future__ import annotations

from datetime import datetime
from typing import Sequence

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_monitor_or_404, get_monitor_source, get_now
from app.api.schemas.monitors import MonitorRead
from app.api.schemas.series import PointRead, SeriesRead
from app.core.config import settings
from app.core.models import Monitor
from app.services.series import build_series
from app.services.window import resolve_window
from app.sources.base import MonitorSource

router = APIRouter(prefix="/monitors", tags=["monitors"])


def _to_read(monitor: Monitor) -> MonitorRead:
    return MonitorRead(
        id=monitor.id,
        name=monitor.name,
        url=monitor.url,
        status=monitor.status,
        last_checked_at=monitor.last_checked_at,
        observation_count=len(monitor.history),
    )


@router.get("/", response_model=Sequence[MonitorRead])
async def list_monitors(source: MonitorSource = Depends(get_monitor_source)) -> Sequence[MonitorRead]:
    return [_to_read(m) for m in await source.list_monitors()]


@router.get("/{monitor_id}", response_model=MonitorRead)
async def get_monitor(monitor: Monitor = Depends(get_monitor_or_404)) -> MonitorRead:
    return _to_read(monitor)


@router.get("/{monitor_id}/series", response_model=SeriesRead)
async def get_series(
    minutes: float = Query(settings.compact_window_minutes),
    monitor: Monitor = Depends(get_monitor_or_404),
    now: datetime = Depends(get_now),
) -> SeriesRead:
    window = resolve_window(minutes, now)
    points = build_series(monitor.history, window)
    return SeriesRead(
        monitor_id=monitor.id,
        minutes=minutes,
        cutoff=window.cutoff,
        now=window.now,
        points=[PointRead.model_validate(p) for p in points],
    )

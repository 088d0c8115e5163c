from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Sequence

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_monitor_or_404, get_monitor_source, get_now
from app.api.schemas.views import DashboardCard, DetailedRead, SparklineRead
from app.core.config import settings
from app.core.models import Monitor
from app.services.presentation import DEFAULT_RANGE_KEY, detailed_view, sparkline_view
from app.sources.base import MonitorSource

router = APIRouter(prefix="/ui", tags=["ui"])


@router.get("/", response_model=Sequence[DashboardCard])
async def dashboard(
    source: MonitorSource = Depends(get_monitor_source),
    now: datetime = Depends(get_now),
) -> Sequence[DashboardCard]:
    cards = []
    for monitor in await source.list_monitors():
        view = sparkline_view(monitor, now, minutes=settings.compact_window_minutes)
        cards.append(
            DashboardCard(
                id=monitor.id,
                name=monitor.name,
                url=monitor.url,
                status=monitor.status,
                sparkline=SparklineRead(**asdict(view)),
            )
        )
    return cards


@router.get("/monitors/{monitor_id}", response_model=DetailedRead)
async def monitor_detail(
    range_key: str = Query(DEFAULT_RANGE_KEY, alias="range"),
    chart_id: str | None = None,
    monitor: Monitor = Depends(get_monitor_or_404),
    now: datetime = Depends(get_now),
) -> DetailedRead:
    view = detailed_view(monitor, range_key, now, chart_id=chart_id, ranges=settings.window_ranges)
    return DetailedRead(
        monitor_id=monitor.id,
        name=monitor.name,
        status=monitor.status,
        **asdict(view),
    )

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from starlette.responses import StreamingResponse

from app.api.dependencies import get_monitor_or_404, get_now
from app.api.schemas.events import EventRead, EventsPage
from app.core.config import settings
from app.core.models import Monitor
from app.services.events import recent_events, select_recent_events
from app.services.export import export_filename, format_csv

router = APIRouter(prefix="/monitors", tags=["events"])


@router.get("/{monitor_id}/events", response_model=EventsPage)
async def list_events(
    retention_days: int = Query(settings.retention_days),
    expanded: bool = False,
    monitor: Monitor = Depends(get_monitor_or_404),
    now: datetime = Depends(get_now),
) -> EventsPage:
    events = recent_events(monitor.history, retention_days, now)
    visible = select_recent_events(monitor.history, retention_days, expanded, now, settings.events_page_size)
    return EventsPage(
        monitor_id=monitor.id,
        retention_days=retention_days,
        expanded=expanded,
        total=len(events),
        has_more=len(events) > settings.events_page_size,
        events=[EventRead.model_validate(e) for e in visible],
    )


@router.get("/{monitor_id}/events.csv")
async def download_events_csv(
    retention_days: int = Query(settings.retention_days),
    monitor: Monitor = Depends(get_monitor_or_404),
    now: datetime = Depends(get_now),
) -> StreamingResponse:
    content = format_csv(monitor.history, retention_days, now)
    headers = {"Content-Disposition": f"attachment; filename={export_filename(retention_days)}"}
    return StreamingResponse(iter([content]), media_type="text/csv", headers=headers)

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.core.models import Status


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    timestamp: datetime
    status: Status


class EventsPage(BaseModel):
    monitor_id: str
    retention_days: int
    expanded: bool
    total: int
    has_more: bool
    events: list[EventRead]

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.core.models import Status


class MonitorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    url: str
    status: Status | None
    last_checked_at: datetime | None
    observation_count: int

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UptimeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    monitor_id: str
    minutes: float
    uptime_ms: int
    downtime_ms: int
    availability: float | None  # in [0,1]
    sample_count: int
    from_ts: datetime
    to_ts: datetime

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.models import Status


class PointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    x: int
    y: int = Field(..., ge=0, le=100)
    status: Status
    timestamp: datetime
    synthetic: bool


class SeriesRead(BaseModel):
    monitor_id: str
    minutes: float
    cutoff: datetime
    now: datetime
    points: list[PointRead]

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from app.api.schemas.series import PointRead
from app.core.models import Status


class SparklineRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    chart_id: str
    points: list[PointRead]
    x_min: int
    x_max: int
    is_down: bool
    placeholder: bool


class DashboardCard(BaseModel):
    id: str
    name: str
    url: str
    status: Status | None
    sparkline: SparklineRead


class DetailedRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    monitor_id: str
    name: str
    status: Status | None
    chart_id: str
    range_key: str
    minutes: int
    ranges: dict[str, int]
    points: list[PointRead]
    x_min: int
    x_max: int
    down_markers: list[int]
    placeholder: bool

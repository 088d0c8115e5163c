from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping

from app.core.errors import InvalidWindowError
from app.core.models import Monitor, Status
from app.services.history import to_epoch_millis
from app.services.series import PlottedPoint, build_series
from app.services.window import resolve_window

COMPACT_WINDOW_MINUTES = 20
DEFAULT_RANGES: Mapping[str, int] = {"20m": 20, "1h": 60, "3h": 180}
DEFAULT_RANGE_KEY = "20m"


@dataclass(frozen=True)
class SparklineView:
    chart_id: str
    points: list[PlottedPoint]
    x_min: int
    x_max: int
    is_down: bool
    placeholder: bool


@dataclass(frozen=True)
class DetailedView:
    chart_id: str
    range_key: str
    minutes: int
    ranges: dict[str, int]
    points: list[PlottedPoint]
    x_min: int
    x_max: int
    down_markers: list[int] = field(default_factory=list)
    placeholder: bool = False


def default_chart_id(monitor: Monitor) -> str:
    return f"chart-{monitor.id}"


def resolve_range(range_key: str, ranges: Mapping[str, int] = DEFAULT_RANGES) -> int:
    try:
        return ranges[range_key]
    except KeyError:
        raise InvalidWindowError(
            f"unknown range {range_key!r}; expected one of {', '.join(ranges)}"
        ) from None


def sparkline_view(
    monitor: Monitor,
    now: datetime | None = None,
    chart_id: str | None = None,
    minutes: int = COMPACT_WINDOW_MINUTES,
) -> SparklineView:
    window = resolve_window(minutes, now)
    points = build_series(monitor.history, window)
    # colour follows the newest record as delivered, not the sorted series
    is_down = bool(monitor.history) and monitor.history[-1].status == Status.DOWN
    return SparklineView(
        chart_id=chart_id or default_chart_id(monitor),
        points=points,
        x_min=to_epoch_millis(window.cutoff),
        x_max=to_epoch_millis(window.now),
        is_down=is_down,
        placeholder=not monitor.history,
    )


def detailed_view(
    monitor: Monitor,
    range_key: str = DEFAULT_RANGE_KEY,
    now: datetime | None = None,
    chart_id: str | None = None,
    ranges: Mapping[str, int] = DEFAULT_RANGES,
) -> DetailedView:
    minutes = resolve_range(range_key, ranges)
    window = resolve_window(minutes, now)
    points = build_series(monitor.history, window)
    return DetailedView(
        chart_id=chart_id or default_chart_id(monitor),
        range_key=range_key,
        minutes=minutes,
        ranges=dict(ranges),
        points=points,
        x_min=to_epoch_millis(window.cutoff),
        x_max=to_epoch_millis(window.now),
        down_markers=[i for i, p in enumerate(points) if p.status == Status.DOWN],
        placeholder=not points,
    )

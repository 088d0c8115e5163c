from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from app.core.models import Observation, Status
from app.services.series import build_series
from app.services.window import Window


@dataclass(frozen=True)
class UptimeSummary:
    uptime_ms: int
    downtime_ms: int
    availability: float | None  # in [0,1]
    sample_count: int
    from_ts: datetime
    to_ts: datetime


def uptime_summary(history: Sequence[Observation], window: Window) -> UptimeSummary:
    points = build_series(history, window)
    sample_count = sum(1 for o in history if window.cutoff <= o.timestamp <= window.now)

    uptime_ms = 0
    downtime_ms = 0
    # Each interval belongs to the status at its left end. Before the first
    # point the status is unknown and not attributed.
    for current, following in zip(points, points[1:]):
        delta = following.x - current.x
        if current.status == Status.UP:
            uptime_ms += delta
        else:
            downtime_ms += delta

    total = uptime_ms + downtime_ms
    availability = uptime_ms / total if total > 0 else None

    return UptimeSummary(
        uptime_ms=uptime_ms,
        downtime_ms=downtime_ms,
        availability=availability,
        sample_count=sample_count,
        from_ts=window.cutoff,
        to_ts=window.now,
    )

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from app.core.models import Observation, Status
from app.services.history import checked_history, from_epoch_millis, to_epoch_millis
from app.services.window import Window

UP_VALUE = 100
DOWN_VALUE = 0


@dataclass(frozen=True)
class PlottedPoint:
    x: int  # epoch millis
    y: int
    status: Status
    timestamp: datetime
    synthetic: bool = False


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def status_value(status: Status) -> int:
    return _clamp(UP_VALUE if status == Status.UP else DOWN_VALUE, DOWN_VALUE, UP_VALUE)


def _point(ts: datetime, status: Status, *, synthetic: bool) -> PlottedPoint:
    return PlottedPoint(
        x=to_epoch_millis(ts),
        y=status_value(status),
        status=status,
        timestamp=ts,
        synthetic=synthetic,
    )


def _edge(x: int, like: PlottedPoint) -> PlottedPoint:
    return PlottedPoint(x=x, y=like.y, status=like.status, timestamp=from_epoch_millis(x), synthetic=True)


def sorted_history(history: Iterable[Observation]) -> list[Observation]:
    """Chronological copy of ``history``; ties keep their received order."""
    return sorted(checked_history(history), key=lambda o: o.timestamp)


def build_series(history: Sequence[Observation], window: Window) -> list[PlottedPoint]:
    """Step-function series of ``history`` clipped to ``window``.

    The series starts at the window cutoff with the status active at that
    moment (when it is known), inserts a point one millisecond before every
    status change carrying the previous value so a connected line renders a
    vertical riser, and is extended to ``window.now``. Points are unique per
    ``x`` and ordered ascending. An empty history gives an empty series.
    """
    ordered = sorted_history(history)
    if not ordered:
        return []

    timestamps = [o.timestamp for o in ordered]
    lo = bisect_left(timestamps, window.cutoff)
    hi = bisect_right(timestamps, window.now)
    inside = ordered[lo:hi]

    points = [_point(o.timestamp, o.status, synthetic=False) for o in inside]
    cutoff_x = to_epoch_millis(window.cutoff)

    # an observation exactly at the cutoff already pins the left edge
    if not (points and points[0].x == cutoff_x):
        if lo > 0:
            # latest observation strictly before the cutoff holds at window start
            points.insert(0, _point(window.cutoff, ordered[lo - 1].status, synthetic=True))
        elif not points:
            # Nothing at or before the window: assume the earliest known status
            # already held. This is a guess; the real status is unknown.
            points.append(_point(window.cutoff, ordered[0].status, synthetic=True))

    stepped: list[PlottedPoint] = []
    previous: PlottedPoint | None = None
    for point in points:
        # a riser never reaches left of the window
        if previous is not None and previous.status != point.status and point.x - 1 >= cutoff_x:
            stepped.append(_edge(point.x - 1, previous))
        stepped.append(point)
        previous = point

    now_x = to_epoch_millis(window.now)
    if stepped and stepped[-1].x < now_x:
        stepped.append(_edge(now_x, stepped[-1]))

    unique = {p.x: p for p in stepped}
    return sorted(unique.values(), key=lambda p: p.x)

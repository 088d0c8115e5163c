from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.core.errors import InvalidWindowError


@dataclass(frozen=True)
class Window:
    cutoff: datetime
    now: datetime

    @property
    def duration(self) -> timedelta:
        return self.now - self.cutoff


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_window(duration_minutes: float, now: datetime | None = None) -> Window:
    """Trailing window ending at ``now``; the clock is read at most once."""
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, (int, float)):
        raise InvalidWindowError(f"window duration must be a number of minutes, got {duration_minutes!r}")
    if not duration_minutes > 0:
        raise InvalidWindowError(f"window duration must be positive, got {duration_minutes!r}")

    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        raise InvalidWindowError("window end must be timezone-aware")

    try:
        cutoff = now - timedelta(minutes=duration_minutes)
    except OverflowError as exc:
        raise InvalidWindowError(f"window duration out of range: {duration_minutes!r}") from exc
    return Window(cutoff=cutoff, now=now)


def retention_cutoff(retention_days: int, now: datetime) -> datetime:
    if isinstance(retention_days, bool) or not isinstance(retention_days, int) or retention_days <= 0:
        raise InvalidWindowError(f"retention must be a positive number of days, got {retention_days!r}")
    try:
        return now - timedelta(days=retention_days)
    except OverflowError as exc:
        raise InvalidWindowError(f"retention out of range: {retention_days!r}") from exc

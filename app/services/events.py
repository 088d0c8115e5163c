from __future__ import annotations

from datetime import datetime
from typing import Sequence

from app.core.models import Observation
from app.services.export import DEFAULT_RETENTION_DAYS
from app.services.history import checked_history
from app.services.window import retention_cutoff, utc_now

DEFAULT_PAGE_SIZE = 5


def recent_events(
    history: Sequence[Observation],
    retention_days: int = DEFAULT_RETENTION_DAYS,
    now: datetime | None = None,
) -> list[Observation]:
    """Retained observations, newest first (a feed, unlike the CSV export)."""
    since = retention_cutoff(retention_days, now or utc_now())
    retained = [item for item in checked_history(history) if item.timestamp >= since]
    return sorted(retained, key=lambda o: o.timestamp, reverse=True)


def select_recent_events(
    history: Sequence[Observation],
    retention_days: int = DEFAULT_RETENTION_DAYS,
    expanded: bool = False,
    now: datetime | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[Observation]:
    events = recent_events(history, retention_days, now)
    return events if expanded else events[:page_size]

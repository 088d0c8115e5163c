from __future__ import annotations

from datetime import datetime
from typing import Sequence

from app.core.models import Observation
from app.services.history import checked_history, format_timestamp
from app.services.window import retention_cutoff, utc_now

CSV_HEADER = "Timestamp,Status"
DEFAULT_RETENTION_DAYS = 6


def export_filename(retention_days: int = DEFAULT_RETENTION_DAYS) -> str:
    return f"uptime_events_past_{retention_days}_days.csv"


def format_csv(
    history: Sequence[Observation],
    retention_days: int = DEFAULT_RETENTION_DAYS,
    now: datetime | None = None,
) -> str:
    """Render retained observations as ``Timestamp,Status`` lines.

    Rows keep the order they were received in; the export is an append log.
    Fields are not quoted: ISO timestamps and status names never contain a comma.
    """
    since = retention_cutoff(retention_days, now or utc_now())
    # joined by hand: csv.writer would end rows with \r\n; fields never need quoting
    lines = [CSV_HEADER]
    lines.extend(
        f"{format_timestamp(item.timestamp)},{item.status.value}"
        for item in checked_history(history)
        if item.timestamp >= since
    )
    return "\n".join(lines)

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from app.alerts.base import AlertEvent
from app.core.models import Monitor, Status
from app.services.window import utc_now


class TransitionTracker:
    """Remembers the last status seen per monitor between polls."""

    def __init__(self) -> None:
        self._last: dict[str, Status] = {}

    def observe(self, monitors: Iterable[Monitor], now: datetime | None = None) -> list[AlertEvent]:
        detected_at = now or utc_now()
        events: list[AlertEvent] = []
        for monitor in monitors:
            if monitor.status is None:
                continue
            previous = self._last.get(monitor.id)
            self._last[monitor.id] = monitor.status
            if previous is not None and previous != monitor.status:
                events.append(
                    AlertEvent(
                        monitor_id=monitor.id,
                        monitor_name=monitor.name,
                        url=monitor.url,
                        status=monitor.status,
                        previous_status=previous,
                        detected_at=detected_at,
                    )
                )
        return events

    def retain(self, monitor_ids: Iterable[str]) -> None:
        """Drop state for monitors that are no longer reported."""
        keep = set(monitor_ids)
        for monitor_id in list(self._last):
            if monitor_id not in keep:
                del self._last[monitor_id]

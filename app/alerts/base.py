from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from app.core.models import Status


@dataclass(frozen=True)
class AlertEvent:
    monitor_id: str
    monitor_name: str
    url: str
    status: Status
    previous_status: Status
    detected_at: datetime


class AlertSender(Protocol):
    async def send(self, event: AlertEvent) -> None:  # pragma: no cover - interface
        ...

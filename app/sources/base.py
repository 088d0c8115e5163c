from __future__ import annotations

from typing import Protocol, Sequence

from app.core.models import Monitor


class MonitorSource(Protocol):
    async def list_monitors(self) -> Sequence[Monitor]:  # pragma: no cover - interface
        ...

    async def get_monitor(self, monitor_id: str) -> Monitor | None:  # pragma: no cover - interface
        ...

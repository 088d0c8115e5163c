from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

import pytest

from app.core.models import Monitor, Observation, Status

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


class StaticMonitorSource:
    def __init__(self, monitors: Sequence[Monitor]) -> None:
        self.monitors = list(monitors)

    async def list_monitors(self) -> Sequence[Monitor]:
        return list(self.monitors)

    async def get_monitor(self, monitor_id: str) -> Monitor | None:
        for monitor in self.monitors:
            if monitor.id == monitor_id:
                return monitor
        return None


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def obs() -> Callable[..., Observation]:
    """Observation ``minutes`` before NOW (negative values lie in the future)."""

    def _make(minutes: float, status: str = "up") -> Observation:
        ts = NOW - timedelta(minutes=minutes)
        return Observation(timestamp=ts, status=Status(status))

    return _make


@pytest.fixture
def make_monitor() -> Callable[..., Monitor]:
    def _make(monitor_id: str = "m1", history: Sequence[Observation] = (), status: str | None = None) -> Monitor:
        if status is None and history:
            status = history[-1].status.value
        return Monitor(
            id=monitor_id,
            name=f"Service {monitor_id}",
            url=f"https://{monitor_id}.example.com",
            status=Status(status) if status else None,
            history=tuple(history),
        )

    return _make

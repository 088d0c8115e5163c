from __future__ import annotations

import asyncio
import logging
import uuid

from app.alerts.base import AlertEvent, AlertSender
from app.alerts.log import LogAlertSender
from app.core.config import settings
from app.core.errors import MonitorSourceError, UptimeDataError
from app.services.transitions import TransitionTracker
from app.sources.base import MonitorSource
from app.sources.factory import build_monitor_source

logger = logging.getLogger(__name__)


class MonitorPoller:
    def __init__(
        self,
        source: MonitorSource,
        sender: AlertSender | None = None,
        tracker: TransitionTracker | None = None,
        poll_interval_sec: float = 10.0,
    ) -> None:
        self._source = source
        self._sender = sender or LogAlertSender()
        self._tracker = tracker or TransitionTracker()
        self._poll_interval_sec = poll_interval_sec
        self._worker_id = f"poller-{uuid.uuid4()}"

    async def run_forever(self) -> None:
        logger.info("poller started", extra={"worker_id": self._worker_id})
        while True:
            await self.poll_once()
            await asyncio.sleep(self._poll_interval_sec)

    async def poll_once(self) -> list[AlertEvent]:
        try:
            monitors = await self._source.list_monitors()
        except (MonitorSourceError, UptimeDataError) as exc:
            logger.warning("poll skipped: %s", exc, extra={"worker_id": self._worker_id})
            return []

        events = self._tracker.observe(monitors)
        self._tracker.retain(m.id for m in monitors)
        for event in events:
            await self._send(event)
        return events

    async def _send(self, event: AlertEvent) -> None:
        try:
            await self._sender.send(event)
        except Exception:
            logger.exception("alert send failed", extra={"monitor_id": event.monitor_id})


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    poller = MonitorPoller(
        build_monitor_source(settings),
        poll_interval_sec=settings.poll_interval_sec,
    )
    asyncio.run(poller.run_forever())


if __name__ == "__main__":
    main()

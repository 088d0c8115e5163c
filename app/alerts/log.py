from __future__ import annotations

import logging

from app.alerts.base import AlertEvent, AlertSender
from app.core.models import Status

logger = logging.getLogger(__name__)


class LogAlertSender(AlertSender):
    """Reports status changes to the log only; nothing is delivered."""

    async def send(self, event: AlertEvent) -> None:
        level = logging.WARNING if event.status == Status.DOWN else logging.INFO
        logger.log(
            level,
            "%s is %s (was %s)",
            event.monitor_name,
            event.status.value.upper(),
            event.previous_status.value,
            extra={
                "monitor_id": event.monitor_id,
                "url": event.url,
                "detected_at": event.detected_at.isoformat(),
            },
        )

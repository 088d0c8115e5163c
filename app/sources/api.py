from __future__ import annotations

import logging
from typing import Callable, Sequence

import httpx

from app.core.errors import MonitorSourceError
from app.core.models import Monitor
from app.services.history import parse_monitor
from app.sources.base import MonitorSource

logger = logging.getLogger(__name__)


class ApiMonitorSource(MonitorSource):
    """Reads monitors and their history from the ``GET /monitors`` endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout_sec: float = 5.0,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/monitors"
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=timeout_sec))

    async def list_monitors(self) -> Sequence[Monitor]:
        async with self._client_factory() as client:
            try:
                response = await client.get(self._url)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPError as exc:
                error = _normalize_error(exc)
                logger.warning("monitor fetch failed", extra={"url": self._url, "error": error})
                raise MonitorSourceError(f"failed to fetch monitors: {error}") from exc
            except ValueError as exc:
                raise MonitorSourceError("monitors endpoint returned invalid JSON") from exc

        if not isinstance(payload, list):
            raise MonitorSourceError(f"expected a list of monitors, got {type(payload).__name__}")
        return [parse_monitor(item) for item in payload]

    async def get_monitor(self, monitor_id: str) -> Monitor | None:
        # the collaborator has no single-monitor endpoint
        for monitor in await self.list_monitors():
            if monitor.id == monitor_id:
                return monitor
        return None


def _normalize_error(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        return "connect_error"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"http_{exc.response.status_code}"
    if isinstance(exc, httpx.TransportError):
        return exc.__class__.__name__.lower()
    return str(exc)

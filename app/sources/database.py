from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.errors import MonitorSourceError
from app.core.models import Monitor, Observation
from app.db.models import Target
from app.sources.base import MonitorSource


class DatabaseMonitorSource(MonitorSource):
    """Read-only view of the checker's ``targets`` and ``check_results`` tables."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def list_monitors(self) -> Sequence[Monitor]:
        try:
            async with self._session_factory() as session:
                rows = await session.scalars(
                    select(Target)
                    .where(Target.is_active.is_(True))
                    .order_by(Target.created_at)
                )
                return [_to_monitor(target) for target in rows]
        except SQLAlchemyError as exc:
            raise MonitorSourceError(f"failed to load monitors: {exc.__class__.__name__}") from exc

    async def get_monitor(self, monitor_id: str) -> Monitor | None:
        try:
            target_id = uuid.UUID(monitor_id)
        except ValueError:
            return None

        try:
            async with self._session_factory() as session:
                target = await session.get(Target, target_id)
                if target is None or not target.is_active:
                    return None
                return _to_monitor(target)
        except SQLAlchemyError as exc:
            raise MonitorSourceError(f"failed to load monitor {monitor_id}: {exc.__class__.__name__}") from exc


def _as_utc(ts: datetime) -> datetime:
    # SQLite drops the offset; values are written in UTC
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def _to_monitor(target: Target) -> Monitor:
    history = tuple(
        Observation(timestamp=_as_utc(check.checked_at), status=check.status)
        for check in target.check_results
    )
    latest = max(history, key=lambda o: o.timestamp) if history else None
    return Monitor(
        id=str(target.id),
        name=target.name,
        url=target.url,
        status=latest.status if latest else None,
        history=history,
    )

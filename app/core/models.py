from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime

from app.core.errors import InvalidObservationError


class Status(str, enum.Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Observation:
    timestamp: datetime
    status: Status

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            raise InvalidObservationError(f"timestamp must be a datetime, got {self.timestamp!r}")
        if self.timestamp.tzinfo is None or self.timestamp.utcoffset() is None:
            raise InvalidObservationError(f"timestamp must be timezone-aware: {self.timestamp.isoformat()}")
        if not isinstance(self.status, Status):
            raise InvalidObservationError(f"unknown status: {self.status!r}")


@dataclass(frozen=True)
class Monitor:
    id: str
    name: str
    url: str
    status: Status | None = None
    history: tuple[Observation, ...] = field(default_factory=tuple)

    @property
    def last_checked_at(self) -> datetime | None:
        if not self.history:
            return None
        return max(o.timestamp for o in self.history)

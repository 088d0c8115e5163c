from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Mapping

from app.core.errors import InvalidObservationError
from app.core.models import Monitor, Observation, Status

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> datetime:
    """Accept an aware datetime, an ISO-8601 string with offset, or epoch millis."""
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, bool):
        raise InvalidObservationError(f"invalid timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        try:
            ts = EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError) as exc:
            raise InvalidObservationError(f"invalid timestamp: {value!r}") from exc
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            ts = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidObservationError(f"invalid timestamp: {value!r}") from exc
    else:
        raise InvalidObservationError(f"invalid timestamp: {value!r}")

    if ts.tzinfo is None or ts.utcoffset() is None:
        raise InvalidObservationError(f"timestamp has no timezone: {value!r}")
    return ts.astimezone(timezone.utc)


def parse_status(value: Any) -> Status:
    if isinstance(value, Status):
        return value
    try:
        return Status(value)
    except ValueError as exc:
        raise InvalidObservationError(f"unknown status: {value!r}") from exc


def parse_observation(raw: Mapping[str, Any]) -> Observation:
    if not isinstance(raw, Mapping):
        raise InvalidObservationError(f"observation must be an object, got {type(raw).__name__}")
    if "timestamp" not in raw or "status" not in raw:
        raise InvalidObservationError("observation requires 'timestamp' and 'status'")
    return Observation(
        timestamp=parse_timestamp(raw["timestamp"]),
        status=parse_status(raw["status"]),
    )


def parse_monitor(raw: Mapping[str, Any]) -> Monitor:
    if not isinstance(raw, Mapping):
        raise InvalidObservationError(f"monitor must be an object, got {type(raw).__name__}")
    monitor_id = raw.get("_id", raw.get("id"))
    if monitor_id is None:
        raise InvalidObservationError("monitor record has no id")

    history_raw = raw.get("history") or []
    if not isinstance(history_raw, list):
        raise InvalidObservationError(f"monitor {monitor_id} history must be a list")

    status_raw = raw.get("status")
    return Monitor(
        id=str(monitor_id),
        name=str(raw.get("name", "")),
        url=str(raw.get("url", "")),
        status=parse_status(status_raw) if status_raw is not None else None,
        history=tuple(parse_observation(item) for item in history_raw),
    )


def format_timestamp(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_epoch_millis(ts: datetime) -> int:
    return (ts - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


def checked_history(history: Iterable[Observation]) -> list[Observation]:
    items = list(history)
    for item in items:
        if not isinstance(item, Observation):
            raise InvalidObservationError(f"expected Observation, got {type(item).__name__}")
    return items

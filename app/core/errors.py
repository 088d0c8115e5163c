from __future__ import annotations


class UptimeDataError(ValueError):
    """Base class for rejected monitor data or window parameters."""


class InvalidObservationError(UptimeDataError):
    pass


class InvalidWindowError(UptimeDataError):
    pass


class MonitorSourceError(RuntimeError):
    """The monitor collaborator could not be reached or returned garbage."""

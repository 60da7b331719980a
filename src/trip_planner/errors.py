# src/trip_planner/errors.py

from __future__ import annotations


class TripPlannerError(Exception):
    """Base class for trip planner errors."""


class StorageDecodeError(TripPlannerError):
    """Persisted task blob is present but does not match the task schema."""


class ValidationError(TripPlannerError, ValueError):
    """User input rejected before it reaches the task store."""

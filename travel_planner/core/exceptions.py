"""Domain errors raised by the city service."""
from __future__ import annotations


class TravelPlannerError(Exception):
    """Base class for city service errors."""


class CityValidationError(TravelPlannerError):
    """Raised when a city payload is rejected before any lookup happens."""


__all__ = ["TravelPlannerError", "CityValidationError"]

"""Errors and request settings shared by weather lookups."""
from __future__ import annotations

from dataclasses import dataclass


class WeatherLookupError(RuntimeError):
    """The weather for a city could not be obtained."""


class WeatherQuotaExceeded(WeatherLookupError):
    """The provider rejected the call because a usage limit was hit."""


class CityNotKnownError(WeatherLookupError):
    """The provider has no weather for the requested city."""


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 10.0


__all__ = [
    "WeatherLookupError",
    "WeatherQuotaExceeded",
    "CityNotKnownError",
    "RequestConfig",
]

"""Core abstractions for the travel planner domain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass(frozen=True, slots=True)
class WeatherData:
    """Current conditions returned by a weather lookup."""

    description: str
    temperature_c: float


@dataclass(frozen=True, slots=True)
class CityRecord:
    """A stored city enriched with the weather observed when it was added.

    The weather fields are a snapshot: they are written once on creation and
    never refreshed.
    """

    id: str
    name: str
    country: Optional[str]
    weather_description: str
    temperature: float
    created_at: str


class WeatherLookup(Protocol):
    """A data source returning current weather for a city name."""

    name: str

    def lookup(self, city_name: str) -> WeatherData:
        """Fetch current conditions for ``city_name``."""
        ...


class CityStore(Protocol):
    """Persistence for city records, one document per city."""

    def insert(
        self,
        *,
        name: str,
        country: Optional[str],
        weather_description: str,
        temperature: float,
    ) -> CityRecord:
        """Store a new record and return it with its generated id."""
        ...

    def list(self) -> List[CityRecord]:
        ...

    def get(self, city_id: str) -> Optional[CityRecord]:
        ...

    def delete(self, city_id: str) -> bool:
        """Remove a record; return whether anything was deleted."""
        ...

    def count(self) -> int:
        ...

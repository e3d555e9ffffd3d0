"""City service that enriches new cities with current weather before storing them."""
from __future__ import annotations

import logging
from typing import List, Optional

from travel_planner.core.abstractions import CityRecord, CityStore, WeatherLookup
from travel_planner.core.exceptions import CityValidationError
from travel_planner.core.health import HealthRegistry
from travel_planner.core.providers.base import WeatherLookupError


logger = logging.getLogger(__name__)


class CityService:
    """Bridge between the API layer, the weather lookup and the city store.

    Weather is fetched exactly once, when a city is created. A failed lookup
    aborts the creation and nothing is written.
    """

    def __init__(
        self,
        store: CityStore,
        weather: WeatherLookup,
        *,
        health: Optional[HealthRegistry] = None,
    ) -> None:
        self._store = store
        self._weather = weather
        self._health = health

    def create(self, name: str, country: Optional[str] = None) -> CityRecord:
        name = (name or "").strip()
        if not name:
            raise CityValidationError("City name is required")
        country = (country or "").strip() or None

        try:
            weather = self._weather.lookup(name)
        except WeatherLookupError as exc:
            logger.warning("Weather lookup for %s via %s failed: %s", name, self._weather.name, exc)
            self._record_lookup(ok=False)
            raise
        self._record_lookup(ok=True)

        record = self._store.insert(
            name=name,
            country=country,
            weather_description=weather.description,
            temperature=weather.temperature_c,
        )
        logger.info("Stored city %s (%s) as %s", record.name, record.country or "-", record.id)
        return record

    def list_cities(self) -> List[CityRecord]:
        return self._store.list()

    def get_by_id(self, city_id: str) -> Optional[CityRecord]:
        """Return the city stored under ``city_id``, or ``None`` when there is none."""
        return self._store.get(city_id)

    def delete_by_id(self, city_id: str) -> None:
        deleted = self._store.delete(city_id)
        logger.debug("Delete city %s: %s", city_id, "removed" if deleted else "absent")

    def count(self) -> int:
        return self._store.count()

    def _record_lookup(self, *, ok: bool) -> None:
        if self._health is not None:
            self._health.record_lookup(self._weather.name, ok=ok)


__all__ = ["CityService"]

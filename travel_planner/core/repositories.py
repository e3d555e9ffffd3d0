"""City store backed by :mod:`travel_planner.core.models`."""
from __future__ import annotations

from typing import List, Optional

from travel_planner.core import models
from travel_planner.core.abstractions import CityRecord, CityStore


class CityRepository(CityStore):
    """One connection per call; every write touches a single document.

    Without ``database_path`` the process-wide store configured by
    :func:`models.configure_engine` is used.
    """

    def __init__(self, database_path: Optional[str] = None) -> None:
        self._database_path = database_path
        if database_path is not None:
            models.run_migrations(database_path)

    def insert(
        self,
        *,
        name: str,
        country: Optional[str],
        weather_description: str,
        temperature: float,
    ) -> CityRecord:
        document = {
            "name": name,
            "country": country,
            "weather_description": weather_description,
            "temperature": temperature,
        }
        with models.session_scope(self._database_path) as connection:
            return models.insert_city(connection, document=document)

    def list(self) -> List[CityRecord]:
        with models.session_scope(self._database_path) as connection:
            return models.fetch_cities(connection)

    def get(self, city_id: str) -> Optional[CityRecord]:
        with models.session_scope(self._database_path) as connection:
            return models.fetch_city(connection, city_id)

    def delete(self, city_id: str) -> bool:
        with models.session_scope(self._database_path) as connection:
            return models.delete_city(connection, city_id)

    def count(self) -> int:
        with models.session_scope(self._database_path) as connection:
            return models.count_cities(connection)


__all__ = ["CityRepository"]

from __future__ import annotations

import pytest

from requests_mock import Mocker

from travel_planner.api import views
from travel_planner.core import models


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def city_store(tmp_path):
    url = models.configure_engine(f"sqlite:///{tmp_path / 'cities.db'}")
    views.get_city_service.cache_clear()
    views.get_health_registry.cache_clear()
    yield url
    views.get_city_service.cache_clear()
    views.get_health_registry.cache_clear()

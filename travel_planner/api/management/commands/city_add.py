"""Management command to add a city using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from travel_planner.api import views
from travel_planner.core.exceptions import CityValidationError
from travel_planner.core.providers.base import WeatherLookupError


class Command(BaseCommand):
    help = "Add a city enriched with its current weather"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("name", type=str, help="City name")
        parser.add_argument("--country", type=str, default=None, help="Country name")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            record = views.get_city_service().create(options["name"], options.get("country"))
        except CityValidationError as exc:
            raise CommandError(str(exc)) from exc
        except WeatherLookupError as exc:
            raise CommandError(f"Weather lookup failed: {exc}") from exc

        self.stdout.write(json.dumps(views.serialize_record(record)))

"""Management command to query the weather provider without storing anything."""
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from travel_planner.core.providers.base import RequestConfig, WeatherLookupError
from travel_planner.core.providers.openweather import OpenWeatherClient


class Command(BaseCommand):
    help = "Fetch current weather for a city name"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = (options.get("city") or "").strip()
        if not city:
            raise CommandError("--city must not be empty")

        client = OpenWeatherClient(
            api_key=settings.OPENWEATHER_API_KEY,
            base_url=settings.OPENWEATHER_API_URL,
            request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
        )
        try:
            weather = client.lookup(city)
        except WeatherLookupError as exc:
            raise CommandError(f"Weather lookup failed: {exc}") from exc

        payload = {"city": city, **asdict(weather)}
        self.stdout.write(json.dumps(payload))

"""OpenWeather current weather lookup."""
from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from travel_planner.core.abstractions import WeatherData
from travel_planner.core.providers.base import (
    CityNotKnownError,
    RequestConfig,
    WeatherLookupError,
    WeatherQuotaExceeded,
)


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherClient:
    """Integration with the OpenWeather current weather endpoint, queried by city name."""

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.session = session or requests.Session()
        self.request_config = request_config or RequestConfig()
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    def lookup(self, city_name: str) -> WeatherData:  # noqa: D401
        """Return the current description and temperature (Celsius) for ``city_name``."""
        params = {"q": city_name, "appid": self.api_key, "units": "metric"}
        try:
            response = self.session.get(
                self.base_url, params=params, timeout=self.request_config.timeout
            )
        except requests.Timeout as exc:
            logger.error("OpenWeather request for %s timed out", city_name)
            raise WeatherLookupError("timeout") from exc
        except requests.RequestException as exc:
            logger.error("OpenWeather request for %s failed: %s", city_name, exc)
            raise WeatherLookupError("request failed") from exc

        self._log_response(response)
        self._check_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise WeatherLookupError("OpenWeather returned a non-JSON body") from exc
        return self._parse(data)

    def _check_status(self, response: requests.Response) -> None:
        status = response.status_code
        if status < 400:
            return
        logger.warning("OpenWeather returned %s: %s", status, response.text[:200])
        # OpenWeather answers 404 with {"cod": "404", "message": "city not found"}
        if status == 404:
            raise CityNotKnownError("city not found")
        if status == 429:
            raise WeatherQuotaExceeded("quota exceeded")
        raise WeatherLookupError(f"HTTP {status}")

    def _parse(self, data: Any) -> WeatherData:
        if not isinstance(data, dict):
            raise WeatherLookupError("OpenWeather payload is not an object")

        try:
            description = data["weather"][0]["description"]
            temperature = float(data["main"]["temp"])
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise WeatherLookupError("OpenWeather payload is missing weather fields") from exc

        if not isinstance(description, str):
            raise WeatherLookupError("OpenWeather description is not a string")
        return WeatherData(description=description, temperature_c=temperature)

    def _log_response(self, response: requests.Response) -> None:
        if not self._testing_mode:
            return
        logger.info(
            "OpenWeather request",
            extra={"status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["OpenWeatherClient", "DEFAULT_BASE_URL"]

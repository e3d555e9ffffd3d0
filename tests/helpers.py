from __future__ import annotations


OPENWEATHER_URL = "https://openweather.test/data/2.5/weather"


def openweather_payload(description: str = "clear sky", temp: float = 21.5) -> dict:
    return {
        "weather": [{"id": 800, "main": "Clear", "description": description}],
        "main": {"temp": temp, "pressure": 1012, "humidity": 40},
        "name": "Berlin",
        "cod": 200,
    }

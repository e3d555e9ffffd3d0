from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "travel_planner.settings")
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("OPENWEATHER_API_URL", "https://openweather.test/data/2.5/weather")
os.environ.setdefault("TESTING_MODE", "1")

django.setup()

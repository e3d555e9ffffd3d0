"""WSGI entry point for the travel planner service."""
from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "travel_planner.settings")

application = get_wsgi_application()

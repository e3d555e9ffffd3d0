from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand

from travel_planner.api import views


class Command(BaseCommand):
    help = "Print every stored city as JSON"

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        records = views.get_city_service().list_cities()
        self.stdout.write(json.dumps([views.serialize_record(record) for record in records]))

"""REST API views for cities and their weather snapshots."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from travel_planner.api.serializers import CityCreateSerializer
from travel_planner.core.abstractions import CityRecord
from travel_planner.core.exceptions import CityValidationError
from travel_planner.core.health import HealthRegistry
from travel_planner.core.providers.base import RequestConfig, WeatherLookupError
from travel_planner.core.providers.openweather import OpenWeatherClient
from travel_planner.core.repositories import CityRepository
from travel_planner.core.services.city_service import CityService


@lru_cache(maxsize=1)
def get_health_registry() -> HealthRegistry:
    return HealthRegistry()


@lru_cache(maxsize=1)
def get_city_service() -> CityService:
    weather = OpenWeatherClient(
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_API_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )
    return CityService(CityRepository(), weather, health=get_health_registry())


def serialize_record(record: CityRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "country": record.country,
        "weatherDescription": record.weather_description,
        "temperature": record.temperature,
        "createdAt": record.created_at,
    }


class CityListView(APIView):
    """List stored cities or add a new one enriched with current weather."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        records = get_city_service().list_cities()
        return Response([serialize_record(record) for record in records], status=status.HTTP_200_OK)

    def post(self, request, *args, **kwargs):  # noqa: D401
        """Create a city; the weather lookup must succeed or nothing is stored."""
        serializer = CityCreateSerializer(data=request.data)
        if not serializer.is_valid():
            name_errors = serializer.errors.get("name") or ["Invalid city payload"]
            return Response(
                {"detail": str(name_errors[0]), "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            record = get_city_service().create(
                serializer.validated_data["name"],
                serializer.validated_data.get("country"),
            )
        except CityValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except WeatherLookupError as exc:
            return Response(
                {"detail": f"Weather lookup failed: {exc}"},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response(serialize_record(record), status=status.HTTP_201_CREATED)


class CityDetailView(APIView):
    """Fetch or delete a single city by id."""

    permission_classes = [AllowAny]

    def get(self, request, city_id: str, *args, **kwargs):  # noqa: D401
        record = get_city_service().get_by_id(city_id)
        if record is None:
            return Response({"detail": "City not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(serialize_record(record), status=status.HTTP_200_OK)

    def delete(self, request, city_id: str, *args, **kwargs):  # noqa: D401
        """Deleting an unknown id is not an error."""
        get_city_service().delete_by_id(city_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class HealthView(APIView):
    """Report store size and weather lookup counters."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        payload: Dict[str, Any] = {"status": "ok", "cities": get_city_service().count()}
        payload.update(get_health_registry().snapshot())
        return Response(payload, status=status.HTTP_200_OK)

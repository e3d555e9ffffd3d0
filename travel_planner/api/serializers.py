"""Request payload validation for the city endpoints."""
from __future__ import annotations

from rest_framework import serializers


class CityCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        error_messages={
            "required": "City name is required",
            "blank": "City name is required",
            "null": "City name is required",
        },
    )
    country = serializers.CharField(
        allow_blank=True,
        allow_null=True,
        default=None,
    )

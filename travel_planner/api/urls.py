"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from travel_planner.api.views import CityDetailView, CityListView, HealthView

urlpatterns = [
    path("cities", CityListView.as_view(), name="city-list"),
    path("cities/<str:city_id>", CityDetailView.as_view(), name="city-detail"),
    path("health", HealthView.as_view(), name="health"),
]

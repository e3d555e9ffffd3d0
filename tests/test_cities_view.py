from __future__ import annotations

import pytest
from django.test import Client

from tests.helpers import OPENWEATHER_URL, openweather_payload


@pytest.fixture
def client(city_store) -> Client:
    return Client()


def _create(client: Client, **body):
    return client.post("/api/cities", body, content_type="application/json")


def test_create_city_returns_enriched_record(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, json=openweather_payload("clear sky", 21.5))

    response = _create(client, name="Berlin", country="Germany")

    assert response.status_code == 201
    payload = response.json()
    assert payload["id"]
    assert payload["name"] == "Berlin"
    assert payload["country"] == "Germany"
    assert payload["weatherDescription"] == "clear sky"
    assert payload["temperature"] == 21.5


def test_create_without_country(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, json=openweather_payload("mist", 4.0))

    response = _create(client, name="Reykjavik")

    assert response.status_code == 201
    assert response.json()["country"] is None


def test_create_accepts_long_names(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, json=openweather_payload("clear sky", 18.0))
    name = "Llanfair" * 40

    response = _create(client, name=name, country="W" * 300)

    assert response.status_code == 201
    assert response.json()["name"] == name


@pytest.mark.parametrize("body", [{"country": "Germany"}, {"name": ""}, {"name": "   "}, {"name": None}])
def test_create_requires_name(client, requests_mock, body):
    response = _create(client, **body)

    assert response.status_code == 400
    assert response.json()["detail"] == "City name is required"
    assert requests_mock.call_count == 0
    assert client.get("/api/cities").json() == []


def test_create_rejects_non_object_body(client, requests_mock):
    response = client.post("/api/cities", ["Berlin"], content_type="application/json")

    assert response.status_code == 400
    assert "detail" in response.json()
    assert requests_mock.call_count == 0


def test_create_rejects_malformed_json(client, requests_mock):
    response = client.post("/api/cities", "{not json", content_type="application/json")

    assert response.status_code == 400
    assert requests_mock.call_count == 0


def test_failed_lookup_returns_502_and_stores_nothing(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, status_code=500, text="server error")

    response = _create(client, name="Berlin")

    assert response.status_code == 502
    assert response.json()["detail"].startswith("Weather lookup failed")
    assert client.get("/api/cities").json() == []


def test_unknown_city_returns_502(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, status_code=404, json={"cod": "404", "message": "city not found"})

    response = _create(client, name="Atlantis")

    assert response.status_code == 502
    assert client.get("/api/cities").json() == []


def test_list_get_and_delete_roundtrip(client, requests_mock):
    requests_mock.get(OPENWEATHER_URL, json=openweather_payload())
    created = _create(client, name="Berlin", country="Germany").json()
    other = _create(client, name="Vienna", country="Austria").json()

    listing = client.get("/api/cities")
    assert listing.status_code == 200
    assert [city["id"] for city in listing.json()] == [created["id"], other["id"]]

    fetched = client.get(f"/api/cities/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    deleted = client.delete(f"/api/cities/{created['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = client.get(f"/api/cities/{created['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"detail": "City not found"}
    assert [city["id"] for city in client.get("/api/cities").json()] == [other["id"]]


def test_delete_unknown_city_is_no_content(client):
    response = client.delete("/api/cities/never-created")

    assert response.status_code == 204


def test_get_unknown_city_is_not_found(client):
    response = client.get("/api/cities/never-created")

    assert response.status_code == 404

"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient
from campaign_weather.domain.repositories.region_config_repository import RegionConfigRepository
from campaign_weather.domain.exceptions import ConfigurationError
from campaign_weather.presentation.api.main import app, get_region_repository


class InMemoryRegionRepository(RegionConfigRepository):
    def __init__(self, regions):
        self.regions = list(regions)

    def get_regions(self):
        return list(self.regions)


class BrokenRegionRepository(RegionConfigRepository):
    def get_regions(self):
        raise ConfigurationError("Region configuration file not found")


@pytest.fixture
def client(northern_eparchia, southern_highlands):
    repo = InMemoryRegionRepository([northern_eparchia, southern_highlands])
    app.dependency_overrides[get_region_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_lists_endpoints(client):
    body = client.get("/").json()
    assert body["endpoints"]["forecast"] == "/regions/{region_id}/forecast"


def test_list_regions(client):
    response = client.get("/regions")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "Northern Eparchia", "name": "Northern Eparchia", "webhook_count": 1},
        {"id": "Southern Highlands", "name": "Southern Highlands", "webhook_count": 1},
    ]


def test_forecast_for_date(client):
    """An explicit date gives the deterministic condition and its impacts."""
    response = client.get("/regions/Northern Eparchia/forecast", params={"date": "2025-09-01"})
    assert response.status_code == 200

    body = response.json()
    assert body["date"] == "2025-09-01"
    assert body["day_of_week"] == "Monday"
    assert body["season"] == "spring"
    assert body["condition"] == "Spring showers"
    assert body["emoji"] == "🌧️"
    assert body["impacts"] == ["Light rain: -1 to ranged attacks beyond 30ft"]


def test_forecast_is_repeatable(client):
    first = client.get("/regions/Southern Highlands/forecast", params={"date": "2025-12-31"})
    second = client.get("/regions/Southern Highlands/forecast", params={"date": "2025-12-31"})
    assert first.json()["condition"] == second.json()["condition"]


def test_forecast_today(client):
    response = client.get("/regions/Northern Eparchia/forecast")
    assert response.status_code == 200


def test_unknown_region_is_404(client):
    response = client.get("/regions/Atlantis/forecast")
    assert response.status_code == 404
    assert "Atlantis" in response.json()["detail"]


def test_empty_season_is_422(client):
    response = client.get("/regions/Southern Highlands/forecast", params={"date": "2025-04-10"})
    assert response.status_code == 422
    assert "autumn" in response.json()["detail"]


def test_invalid_date_is_422(client):
    response = client.get("/regions/Northern Eparchia/forecast", params={"date": "not-a-date"})
    assert response.status_code == 422


def test_advance(client):
    response = client.get("/regions/Northern Eparchia/advance")
    assert response.status_code == 200
    assert response.json()["region_id"] == "Northern Eparchia"


def test_weekly(client):
    response = client.get("/regions/Northern Eparchia/weekly")
    assert response.status_code == 200

    body = response.json()
    assert body["name"] == "Northern Eparchia"
    assert len(body["days"]) == 7
    assert len({day["date"] for day in body["days"]}) == 7


def test_configuration_error_is_422():
    app.dependency_overrides[get_region_repository] = lambda: BrokenRegionRepository()
    try:
        response = TestClient(app).get("/regions")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 422

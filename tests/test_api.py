# =============================================================================
# tests/test_api.py - API Endpoint Tests
# =============================================================================
# End-to-end tests through FastAPI's TestClient:
# - forecast CRUD and error status codes
# - feature flags (by-date gate, experimental store)
# - health endpoints and request logging
#
# Each test gets a fresh app (see conftest.make_client), so stores never
# leak between tests.
# =============================================================================

import logging
from decimal import Decimal

import pytest

API = "/api/v1/forecasts"


def _create(client, body):
    response = client.post(API, json=body)
    assert response.status_code == 200, response.text
    return response.json()["forecast"]


# =============================================================================
# Create
# =============================================================================

class TestCreateEndpoint:
    """Tests for POST /forecasts."""

    def test_create_forecast(self, client, sample_create_request):
        forecast = _create(client, sample_create_request)

        assert forecast["id"] == 1
        assert forecast["summary"] == "Balmy"
        assert forecast["date"] == "2020-06-01"
        assert Decimal(str(forecast["temperature"])) == Decimal("20")
        assert forecast["scale"] == "celsius"
        assert forecast["location"] == sample_create_request["location"]

    def test_create_converts_to_celsius(self, client, sample_create_request):
        sample_create_request.update({"temperature": 68, "scale": "F"})

        forecast = _create(client, sample_create_request)

        assert Decimal(str(forecast["temperature"])) == Decimal("20")

    def test_create_below_absolute_zero(self, client, sample_create_request):
        sample_create_request["temperature"] = -300

        response = client.post(API, json=sample_create_request)

        assert response.status_code == 400
        assert response.json()["code"] == "TEMPERATURE_OUT_OF_RANGE"

    def test_create_invalid_scale_is_422(self, client, sample_create_request):
        sample_create_request["scale"] = "unknown"

        response = client.post(API, json=sample_create_request)

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_create_location_id_zero_is_400(self, client, sample_create_request):
        sample_create_request["location"]["id"] = 0

        response = client.post(API, json=sample_create_request)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"


# =============================================================================
# Read
# =============================================================================

class TestReadEndpoints:
    """Tests for GET /forecasts, /forecasts/{id} and /forecasts/by-date."""

    def test_list_empty(self, client):
        response = client.get(API)

        assert response.status_code == 200
        assert response.json() == {"weather_forecasts": []}

    def test_list_seeded(self, seeded_client):
        forecasts = seeded_client.get(API).json()["weather_forecasts"]

        assert len(forecasts) == 1
        assert forecasts[0]["location"]["name"] == "Saline, MI"
        assert forecasts[0]["date"] == "2020-05-29"

    def test_get_by_id(self, client, sample_create_request):
        created = _create(client, sample_create_request)

        response = client.get(f"{API}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["forecast"] == created

    def test_get_missing_is_404(self, client):
        response = client.get(f"{API}/42")

        assert response.status_code == 404
        assert response.json()["code"] == "FORECAST_NOT_FOUND"

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_get_non_positive_is_400(self, client, bad_id):
        response = client.get(f"{API}/{bad_id}")

        assert response.status_code == 400
        assert response.json()["detail"] == "Weather Forecast ID's must be positive integers."

    def test_get_by_date(self, seeded_client):
        response = seeded_client.get(f"{API}/by-date", params={"location_id": 1, "date": "2020-05-29"})

        assert response.status_code == 200
        assert response.json()["forecast"]["id"] == 1

    def test_get_by_date_miss_is_404(self, seeded_client):
        response = seeded_client.get(f"{API}/by-date", params={"location_id": 1, "date": "2020-05-30"})

        assert response.status_code == 404
        assert response.json()["details"]["date"] == "5/30/2020"

    def test_get_by_date_disabled(self, client_factory, caplog):
        with client_factory(SEED_SAMPLE_DATA=True, ALLOW_GET_FORECAST_BY_DATE=False) as client:
            with caplog.at_level(logging.WARNING, logger="app.dependencies"):
                response = client.get(f"{API}/by-date", params={"location_id": 1, "date": "2020-05-29"})

        assert response.status_code == 404
        assert response.json()["code"] == "FEATURE_DISABLED"
        assert "ALLOW_GET_FORECAST_BY_DATE" in caplog.text


# =============================================================================
# Update / Delete
# =============================================================================

class TestWriteEndpoints:
    """Tests for PUT and DELETE /forecasts/{id}."""

    def test_update(self, client, sample_create_request):
        created = _create(client, sample_create_request)
        replacement = dict(created, summary="Scorching", temperature=104, scale="f")

        response = client.put(f"{API}/{created['id']}", json={"weather_forecast": replacement})

        assert response.status_code == 200
        forecast = response.json()["forecast"]
        assert forecast["summary"] == "Scorching"
        assert Decimal(str(forecast["temperature"])) == Decimal("40")
        assert forecast["scale"] == "celsius"

    def test_update_id_mismatch(self, client, sample_create_request):
        created = _create(client, sample_create_request)

        response = client.put(f"{API}/99", json={"weather_forecast": created})

        assert response.status_code == 400

    def test_update_below_absolute_zero(self, client, sample_create_request):
        created = _create(client, sample_create_request)
        replacement = dict(created, temperature=-1, scale="kelvin")

        response = client.put(f"{API}/{created['id']}", json={"weather_forecast": replacement})

        assert response.status_code == 400
        assert response.json()["code"] == "TEMPERATURE_OUT_OF_RANGE"

    def test_delete(self, client, sample_create_request):
        created = _create(client, sample_create_request)

        response = client.delete(f"{API}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"deleted": True}
        assert client.get(f"{API}/{created['id']}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete(f"{API}/7")

        assert response.status_code == 200
        assert response.json() == {"deleted": False}

    def test_update_non_positive_is_400(self, client, sample_create_request):
        created = _create(client, sample_create_request)

        response = client.put(f"{API}/0", json={"weather_forecast": dict(created, id=0)})

        assert response.status_code == 400
        assert response.json()["detail"] == "Weather Forecast ID's must be positive integers."

    def test_delete_non_positive_is_400(self, client):
        assert client.delete(f"{API}/0").status_code == 400


# =============================================================================
# Feature Flags
# =============================================================================

class TestExperimentalStore:
    """Tests for USE_EXPERIMENTAL_REPOSITORY."""

    def test_experimental_store_suffixes_summary(self, client_factory, sample_create_request):
        with client_factory(USE_EXPERIMENTAL_REPOSITORY=True, V2_REPOSITORY_SUFFIX="-v2") as client:
            forecast = _create(client, sample_create_request)

        assert forecast["summary"] == "Balmy-v2"

    def test_experimental_store_rejects_overlong_summary(self, client_factory, sample_create_request):
        sample_create_request["summary"] = "x" * 1000

        with client_factory(USE_EXPERIMENTAL_REPOSITORY=True) as client:
            response = client.post(API, json=sample_create_request)
            listing = client.get(API)
            fetched = client.get(f"{API}/1")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FORECAST"
        assert listing.status_code == 200
        assert listing.json() == {"weather_forecasts": []}
        assert fetched.status_code == 404

    def test_standard_store_keeps_summary(self, client, sample_create_request):
        assert _create(client, sample_create_request)["summary"] == "Balmy"


# =============================================================================
# Health / Root / Logging
# =============================================================================

class TestHealthAndLogging:
    """Tests for health endpoints and request logging."""

    def test_health(self, client):
        body = client.get("/api/v1/health").json()

        assert body["status"] == "healthy"
        assert body["environment"] == "development"

    def test_ready(self, client):
        body = client.get("/api/v1/health/ready").json()

        assert body["status"] == "ready"
        assert body["checks"]["store"] == "healthy"

    def test_live(self, client):
        assert client.get("/api/v1/health/live").json()["status"] == "alive"

    def test_root(self, client):
        assert client.get("/").json()["name"] == "Weather Forecast API"

    def test_request_body_is_logged(self, client, sample_create_request, caplog):
        with caplog.at_level(logging.INFO, logger="app.middleware.request_logging"):
            _create(client, sample_create_request)

        assert f"Request Path: {API}" in caplog.text
        assert "Request body:" in caplog.text
        assert "Ann Arbor, MI" in caplog.text

    def test_large_request_body_is_not_logged(self, client_factory, sample_create_request, caplog):
        with client_factory(MAX_REQUEST_BODY_SIZE_TO_LOG=10) as client:
            with caplog.at_level(logging.INFO, logger="app.middleware.request_logging"):
                _create(client, sample_create_request)

        assert "omitting body from logs" in caplog.text
        assert "Request body:" not in caplog.text

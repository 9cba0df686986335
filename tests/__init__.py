# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Weather Forecast API:
# - test_temperature.py: Temperature validation and scale conversion
# - test_location.py: Location validation
# - test_forecast_models.py: Forecast aggregate, date format, mappers
# - test_forecast_store.py: In-memory store semantics
# - test_forecast_service.py: Service orchestration
# - test_api.py: Endpoint tests through FastAPI's TestClient
#
# Run tests with: poetry run pytest
# =============================================================================

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides stores, services and API clients built fresh per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models import Location, StoredLocation
from core.services import ForecastService
from lib.forecast_store import InMemoryForecastStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def saline_location():
    """The location used by the seeded sample forecast."""
    return Location(id=1, latitude=42.166679, longitude=-83.781319, name="Saline, MI")


@pytest.fixture
def ann_arbor_location():
    """A second valid location."""
    return Location(id=2, latitude=40.0, longitude=80.0, name="Ann Arbor, MI")


@pytest.fixture
def stored_location():
    """Location in storage shape."""
    return StoredLocation(id=1, latitude=42.166679, longitude=-83.781319, name="Saline, MI")


@pytest.fixture
def forecast_date():
    return date(2020, 6, 1)


@pytest.fixture
def empty_store():
    """A store with no records."""
    return InMemoryForecastStore()


@pytest.fixture
def service(empty_store):
    """A service over an empty store."""
    return ForecastService(reader=empty_store, writer=empty_store)


@pytest.fixture
def sample_create_request():
    """Valid POST /forecasts body."""
    return {
        "location": {"id": 1, "latitude": 40, "longitude": 80, "name": "Ann Arbor, MI"},
        "date": "2020-06-01",
        "summary": "Balmy",
        "temperature": 20,
        "scale": "c",
    }


def make_client(**overrides) -> TestClient:
    """Build a TestClient over a fresh app with the given setting overrides."""
    values = {"SEED_SAMPLE_DATA": False}
    values.update(overrides)
    return TestClient(create_app(Settings(**values)))


@pytest.fixture
def client_factory():
    """Factory for API clients with custom settings, e.g. feature flags."""
    return make_client


@pytest.fixture
def client():
    """API client over empty stores with default feature flags."""
    with make_client() as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """API client whose stores hold the sample forecast."""
    with make_client(SEED_SAMPLE_DATA=True) as test_client:
        yield test_client


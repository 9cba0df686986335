# =============================================================================
# core/models/ - Domain Models and Schemas
# =============================================================================
# This package contains:
# - temperature.py: Scale-aware Temperature value model
# - location.py: Location value model
# - forecast.py: WeatherForecast aggregate and the month/day/year convention
# - stored.py: Storage record schemas (what the forecast store persists)
# - schemas.py: API request/response schemas
#
# Domain models (dataclasses) validate themselves on construction.
# Schemas (Pydantic) define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Domain Models
# -----------------------------------------------------------------------------
from .temperature import (
    ABSOLUTE_ZERO,
    MAX_TEMPERATURE,
    Celsius,
    Fahrenheit,
    Kelvin,
    Scale,
    Temperature,
    is_valid_scale,
    parse_scale,
)
from .location import Location
from .forecast import (
    WeatherForecast,
    check_summary,
    parse_month_day_year,
    to_month_day_year,
)

# -----------------------------------------------------------------------------
# Storage Records
# -----------------------------------------------------------------------------
from .stored import StoredForecast, StoredLocation

# -----------------------------------------------------------------------------
# API Schemas
# -----------------------------------------------------------------------------
from .schemas import (
    CreateWeatherForecastRequest,
    DeleteWeatherForecastResponse,
    ListWeatherForecastsResponse,
    LocationViewModel,
    UpdateWeatherForecastRequest,
    WeatherForecastResponse,
    WeatherForecastViewModel,
)

__all__ = [
    # Temperature
    "ABSOLUTE_ZERO",
    "MAX_TEMPERATURE",
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "Scale",
    "Temperature",
    "is_valid_scale",
    "parse_scale",
    # Location / Forecast
    "Location",
    "WeatherForecast",
    "parse_month_day_year",
    "to_month_day_year",
    "check_summary",
    # Storage
    "StoredForecast",
    "StoredLocation",
    # API
    "CreateWeatherForecastRequest",
    "DeleteWeatherForecastResponse",
    "ListWeatherForecastsResponse",
    "LocationViewModel",
    "UpdateWeatherForecastRequest",
    "WeatherForecastResponse",
    "WeatherForecastViewModel",
]

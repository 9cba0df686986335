# =============================================================================
# core/models/schemas.py - Forecast API Schemas
# =============================================================================
# These models define the API contract for forecast operations:
# - LocationViewModel / WeatherForecastViewModel: forecast as seen by clients
# - CreateWeatherForecastRequest / UpdateWeatherForecastRequest: inputs
# - WeatherForecastResponse / ListWeatherForecastsResponse /
#   DeleteWeatherForecastResponse: outputs
#
# Pydantic rejects malformed shapes here (422) before the domain models
# get a chance to; the domain still re-validates everything it receives.
# =============================================================================

from datetime import date as Date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from core.models.temperature import is_valid_scale

SCALE_ERROR = (
    "Provided scale is not a valid scale. Valid values are: "
    "'k', 'kelvin', 'f', 'fahrenheit', 'c', 'celsius', case insensitive."
)


def _check_scale(value: str) -> str:
    if not is_valid_scale(value):
        raise ValueError(SCALE_ERROR)
    return value


class LocationViewModel(BaseModel):
    """
    Location as sent and received by clients.

    Example:
        {"id": 1, "latitude": 42.166679, "longitude": -83.781319, "name": "Saline, MI"}
    """

    id: int = Field(..., ge=0, description="Location identifier")

    latitude: float = Field(
        ...,
        ge=-90.0,
        le=90.0,
        description="Latitude must be between -90 and 90 degrees"
    )

    longitude: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        description="Longitude must be between -180 and 180 degrees"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Location name (cannot be empty)"
    )


class WeatherForecastViewModel(BaseModel):
    """
    Forecast as sent and received by clients.

    Responses always report the temperature in Celsius.

    Example:
        {
            "id": 1,
            "summary": "Balmy",
            "date": "2020-06-01",
            "temperature": "20",
            "scale": "celsius",
            "location": {"id": 1, "latitude": 40.0, "longitude": 80.0, "name": "Ann Arbor, MI"}
        }
    """

    id: int = Field(..., description="Forecast identifier")

    summary: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Short description of the weather"
    )

    date: Date = Field(..., description="Forecast date")

    temperature: Decimal = Field(..., description="Temperature reading")

    scale: str = Field(
        ...,
        description="Scale of the reading: c, f, k, celsius, fahrenheit or kelvin"
    )

    location: LocationViewModel = Field(..., description="Forecast location")

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, value: str) -> str:
        return _check_scale(value)


class CreateWeatherForecastRequest(BaseModel):
    """Request body for POST /forecasts."""

    location: LocationViewModel = Field(..., description="Forecast location")

    date: Date = Field(..., description="Forecast date")

    summary: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Short description of the weather"
    )

    temperature: Decimal = Field(..., description="Temperature reading")

    scale: str = Field(
        ...,
        description="Scale of the reading: c, f, k, celsius, fahrenheit or kelvin"
    )

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, value: str) -> str:
        return _check_scale(value)

    model_config = {
        "json_schema_extra": {
            "example": {
                "location": {"id": 1, "latitude": 40, "longitude": 80, "name": "Ann Arbor, MI"},
                "date": "2020-06-01",
                "summary": "Balmy",
                "temperature": 20,
                "scale": "c",
            }
        }
    }


class UpdateWeatherForecastRequest(BaseModel):
    """Request body for PUT /forecasts/{id}: the full replacement forecast."""

    weather_forecast: WeatherForecastViewModel = Field(
        ...,
        description="Replacement forecast; its id must match the path id"
    )


class WeatherForecastResponse(BaseModel):
    """Single forecast response."""
    forecast: WeatherForecastViewModel


class ListWeatherForecastsResponse(BaseModel):
    """All stored forecasts (no ordering guarantee)."""
    weather_forecasts: list[WeatherForecastViewModel] = Field(default_factory=list)


class DeleteWeatherForecastResponse(BaseModel):
    """Whether a forecast was actually removed."""
    deleted: bool

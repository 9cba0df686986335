# =============================================================================
# core/models/stored.py - Storage Record Schemas
# =============================================================================
# The shape the forecast store persists. This is deliberately flatter than
# the domain aggregate:
# - the date is a "month/day/year" string without zero padding ("6/1/2020")
# - the temperature is always Celsius, kept as a plain Decimal
#
# The date string is compared verbatim by location + date lookups, so it
# must be produced with to_month_day_year() and never reformatted.
# =============================================================================

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class StoredLocation(BaseModel):
    """Location as persisted by the store."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Location identifier")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    name: str = Field(..., description="Display name of the location")


class StoredForecast(BaseModel):
    """
    Forecast record as persisted by the store.

    Example:
        {
            "id": 1,
            "location": {"id": 1, "latitude": 42.166679, "longitude": -83.781319, "name": "Saline, MI"},
            "date": "5/29/2020",
            "summary": "Mild",
            "temperature_c": "20"
        }
    """

    model_config = ConfigDict(frozen=True)

    # Assigned by the store on create
    id: int = Field(..., description="Forecast identifier")

    location: StoredLocation = Field(..., description="Forecast location")

    # month/day/year, no zero padding
    date: str = Field(..., description="Forecast date as month/day/year")

    summary: str = Field(..., description="Short description of the weather")

    temperature_c: Decimal = Field(..., description="Temperature in degrees Celsius")

# =============================================================================
# core/mappers.py - Model Conversions
# =============================================================================
# Explicit conversions between the three shapes a forecast takes:
#
#   API view models  <->  domain aggregate  <->  storage records
#   (core/models/schemas.py)  (core/models/forecast.py)  (core/models/stored.py)
#
# Conversions into the domain go through the validating constructors, so a
# view model or record that breaks an invariant raises the domain error.
# Conversions into storage always normalize to Celsius and month/day/year.
# =============================================================================

from core.models.forecast import (
    WeatherForecast,
    parse_month_day_year,
    to_month_day_year,
)
from core.models.location import Location
from core.models.schemas import LocationViewModel, WeatherForecastViewModel
from core.models.stored import StoredForecast, StoredLocation
from core.models.temperature import Celsius, Temperature


# -----------------------------------------------------------------------------
# View model <-> domain
# -----------------------------------------------------------------------------

def location_from_view(view: LocationViewModel) -> Location:
    return Location(
        id=view.id,
        latitude=view.latitude,
        longitude=view.longitude,
        name=view.name,
    )


def location_to_view(location: Location) -> LocationViewModel:
    return LocationViewModel(
        id=location.id,
        latitude=location.latitude,
        longitude=location.longitude,
        name=location.name,
    )


def forecast_from_view(view: WeatherForecastViewModel) -> WeatherForecast:
    """Build a domain forecast, keeping the temperature in the client's scale."""
    return WeatherForecast(
        id=view.id,
        location=location_from_view(view.location),
        date=view.date,
        temperature=Temperature.from_value(view.temperature, view.scale),
        summary=view.summary,
    )


def forecast_to_view(forecast: WeatherForecast) -> WeatherForecastViewModel:
    return WeatherForecastViewModel(
        id=forecast.id,
        summary=forecast.summary,
        date=forecast.date,
        temperature=forecast.temperature.value,
        scale=forecast.temperature.scale.value,
        location=location_to_view(forecast.location),
    )


# -----------------------------------------------------------------------------
# Domain <-> storage record
# -----------------------------------------------------------------------------

def location_to_stored(location: Location) -> StoredLocation:
    return StoredLocation(
        id=location.id,
        latitude=location.latitude,
        longitude=location.longitude,
        name=location.name,
    )


def location_from_stored(stored: StoredLocation) -> Location:
    return Location(
        id=stored.id,
        latitude=stored.latitude,
        longitude=stored.longitude,
        name=stored.name,
    )


def forecast_to_stored(forecast: WeatherForecast) -> StoredForecast:
    """Flatten a forecast for storage: Celsius value, month/day/year date."""
    return StoredForecast(
        id=forecast.id,
        location=location_to_stored(forecast.location),
        date=to_month_day_year(forecast.date),
        summary=forecast.summary,
        temperature_c=forecast.temperature.to_celsius().value,
    )


def forecast_from_stored(stored: StoredForecast) -> WeatherForecast:
    """Rebuild the aggregate from a record; the temperature comes back in Celsius."""
    return WeatherForecast(
        id=stored.id,
        location=location_from_stored(stored.location),
        date=parse_month_day_year(stored.date),
        temperature=Celsius(stored.temperature_c),
        summary=stored.summary,
    )

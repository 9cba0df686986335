# =============================================================================
# core/services/forecast_service.py - Forecast Business Logic
# =============================================================================
# Orchestrates forecast CRUD between the API layer and the forecast store:
# - rejects unusable keys (non-positive ids, missing dates) before the store
# - converts temperatures to Celsius and dates to month/day/year on the way in
# - rebuilds domain aggregates from stored records on the way out
#
# The reader and writer are injected, so any ForecastStore variant (or a
# test double) can sit behind the service.
# =============================================================================

import logging
from datetime import date as Date
from decimal import Decimal

from app.exceptions import InvalidRequestError
from core.mappers import forecast_from_stored, forecast_to_stored, location_to_stored
from core.models.forecast import WeatherForecast, check_summary, to_month_day_year
from core.models.location import Location
from core.models.temperature import Temperature
from lib.forecast_store import ForecastReader, ForecastWriter

logger = logging.getLogger(__name__)


ID_ERROR = "Weather Forecast ID's must be positive integers."


def _require_positive_id(forecast_id: int) -> None:
    if forecast_id is None or forecast_id <= 0:
        raise InvalidRequestError(ID_ERROR, "id")


def _require_positive_location_id(location_id: int) -> None:
    if location_id is None or location_id <= 0:
        raise InvalidRequestError(
            f"Location id must be a positive integer, but found {location_id}.", "location.id"
        )


def _require_date(value: Date | None) -> None:
    if value is None:
        raise InvalidRequestError("Date cannot be null or empty.", "date")


class ForecastService:
    """
    Service for weather forecast operations.

    Provides a clean interface between API routes and forecast storage.
    """

    def __init__(self, reader: ForecastReader, writer: ForecastWriter):
        self.reader = reader
        self.writer = writer

    async def create_forecast(
        self,
        location: Location,
        date: Date,
        temperature: Decimal,
        scale: str,
        summary: str,
    ) -> WeatherForecast:
        """
        Create a new forecast.

        Args:
            location: Where the forecast applies
            date: Calendar date of the forecast
            temperature: Reading in the scale named by `scale`
            scale: Scale token ("c", "fahrenheit", ...)
            summary: Short description of the weather

        Returns:
            The stored forecast, temperature in Celsius

        Raises:
            InvalidRequestError: If the location id or date is unusable
            InvalidScaleError / TemperatureOutOfRangeError: If the reading is invalid
            ForecastValidationError: If the summary is empty or too long
        """
        _require_positive_location_id(location.id)
        _require_date(date)
        check_summary(summary)

        temperature_c = Temperature.from_value(temperature, scale).to_celsius().value

        stored = await self.writer.create(
            location_to_stored(location),
            to_month_day_year(date),
            summary,
            temperature_c,
        )

        logger.info(f"Created forecast {stored.id} for location {location.id} on {stored.date}")
        return forecast_from_stored(stored)

    async def get_forecast_for_date(
        self,
        location_id: int,
        date: Date,
    ) -> WeatherForecast | None:
        """
        Get the forecast for a location on a date.

        Returns None if there is none. When several forecasts share the
        location and date, the store decides which one comes back.
        """
        _require_positive_location_id(location_id)
        _require_date(date)

        date_str = to_month_day_year(date)
        logger.debug(f"Looking up forecast for location {location_id} on {date_str}")

        stored = await self.reader.get_by_location_and_date(location_id, date_str)
        if stored is None:
            return None

        return forecast_from_stored(stored)

    async def get_forecast_by_id(self, forecast_id: int) -> WeatherForecast:
        """
        Get a forecast by id.

        Raises:
            InvalidRequestError: If the id is not positive
            ForecastNotFoundError: If no forecast has this id
        """
        _require_positive_id(forecast_id)

        stored = await self.reader.get_by_id(forecast_id)
        return forecast_from_stored(stored)

    async def list_forecasts(self) -> list[WeatherForecast]:
        """List every stored forecast."""
        records = await self.reader.list_forecasts()
        return [forecast_from_stored(record) for record in records]

    async def update_forecast(self, forecast: WeatherForecast) -> WeatherForecast:
        """
        Replace the forecast stored under forecast.id.

        The id does not have to exist yet; an update of a missing id
        creates it. The whole aggregate is re-validated first.

        Raises:
            InvalidRequestError: If the forecast or location id is not positive
            ForecastValidationError: If the aggregate is invalid
        """
        forecast.validate()

        _require_positive_id(forecast.id)
        _require_positive_location_id(forecast.location.id)

        stored = await self.writer.update(forecast_to_stored(forecast))

        logger.info(f"Updated forecast {stored.id}")
        return forecast_from_stored(stored)

    async def delete_forecast(self, forecast_id: int) -> bool:
        """
        Delete a forecast.

        Returns:
            True if a forecast was removed, False if none existed
        """
        _require_positive_id(forecast_id)

        deleted = await self.writer.delete(forecast_id)

        if deleted:
            logger.info(f"Deleted forecast {forecast_id}")
        else:
            logger.info(f"Delete requested for missing forecast {forecast_id}")

        return deleted

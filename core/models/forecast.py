# =============================================================================
# core/models/forecast.py - WeatherForecast Aggregate
# =============================================================================
# The WeatherForecast aggregate owns one Location and one Temperature.
# It is the unit of consistency for CRUD: create, replace by id, delete by id.
#
# Also home to the month/day/year date convention used by the store.
# =============================================================================

from dataclasses import dataclass
from datetime import date as Date

from app.exceptions import ForecastValidationError, InvalidRequestError
from core.models.location import Location
from core.models.temperature import Temperature

MAX_SUMMARY_LENGTH = 1000


def check_summary(summary: str) -> None:
    """
    Check a forecast summary is present and at most MAX_SUMMARY_LENGTH long.

    Raises:
        ForecastValidationError: If the summary is empty or too long
    """
    if not summary:
        raise ForecastValidationError("Summary cannot be null or empty.", "summary")

    if len(summary) > MAX_SUMMARY_LENGTH:
        raise ForecastValidationError(
            f"Summary cannot be longer than {MAX_SUMMARY_LENGTH} characters.", "summary"
        )


def to_month_day_year(value: Date) -> str:
    """
    Format a date the way the store keys it: "6/1/2020", not "06/01/2020".
    """
    return f"{value.month}/{value.day}/{value.year}"


def parse_month_day_year(value: str) -> Date:
    """
    Parse a stored "month/day/year" string back into a date.

    Raises:
        InvalidRequestError: If the string is not month/day/year
    """
    try:
        month, day, year = (int(part) for part in value.split("/"))
        return Date(year, month, day)
    except (AttributeError, TypeError, ValueError):
        raise InvalidRequestError(
            f"Date {value!r} is not in month/day/year format.", "date"
        ) from None


@dataclass
class WeatherForecast:
    """
    A forecast for one location on one date.

    Location and Temperature validate themselves on construction;
    validate() checks the rest of the aggregate and is called again by
    the service before an update is persisted.
    """
    id: int
    location: Location
    date: Date
    temperature: Temperature
    summary: str

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check the aggregate invariants.

        Raises:
            ForecastValidationError: If any part of the forecast is invalid
        """
        if not isinstance(self.location, Location):
            raise ForecastValidationError("Forecast location is required.", "location")

        if not isinstance(self.temperature, Temperature):
            raise ForecastValidationError("Forecast temperature is required.", "temperature")

        if not isinstance(self.date, Date):
            raise ForecastValidationError("Forecast date is required.", "date")

        check_summary(self.summary)

# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error the service raises on purpose inherits from
# WeatherServiceException and carries its own HTTP status and error code,
# so handlers never have to guess how to present it.
#
# Taxonomy:
# - Validation errors (400): invalid temperature, scale, location, forecast
# - Invalid request shape (400): bad ids or dates caught before the store
# - Not found (404): unknown forecast id, no forecast for location + date
# - Feature disabled (404): the endpoint exists but is switched off
# =============================================================================

from decimal import Decimal
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class WeatherServiceException(Exception):
    """
    Base exception for the Weather Forecast service.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "WEATHER_SERVICE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class TemperatureOutOfRangeError(WeatherServiceException):
    """Raised when a temperature is below absolute zero for its scale."""

    def __init__(self, value: Decimal, scale: str, message: str):
        super().__init__(
            message=message,
            code="TEMPERATURE_OUT_OF_RANGE",
            status_code=400,
            suggestion="Temperatures cannot be colder than absolute zero",
            details={"value": str(value), "scale": scale},
        )
        self.value = value
        self.scale = scale


class InvalidScaleError(WeatherServiceException):
    """Raised when a temperature scale token is not recognized."""

    def __init__(self, scale: str | None):
        super().__init__(
            message=f"Unknown temperature scale: {scale!r}",
            code="INVALID_SCALE",
            status_code=400,
            suggestion="Valid values are: 'k', 'kelvin', 'f', 'fahrenheit', 'c', 'celsius', case insensitive",
            details={"scale": scale},
        )
        self.scale = scale


class LocationCreationError(WeatherServiceException):
    """Raised when a Location violates one of its constraints."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message=message,
            code="INVALID_LOCATION",
            status_code=400,
            details={"field": field},
        )
        self.field = field


class ForecastValidationError(WeatherServiceException):
    """Raised when a WeatherForecast aggregate is not internally valid."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message=message,
            code="INVALID_FORECAST",
            status_code=400,
            details={"field": field},
        )
        self.field = field


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestError(WeatherServiceException):
    """Raised when a request key (id, date) is unusable before any lookup."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
            status_code=400,
            details={"field": field},
        )
        self.field = field


class FeatureDisabledError(WeatherServiceException):
    """Raised when a feature-gated endpoint is switched off."""

    def __init__(self, feature: str):
        super().__init__(
            message="This feature is disabled. Please contact a system administrator for more information.",
            code="FEATURE_DISABLED",
            status_code=404,
            details={"feature": feature},
        )
        self.feature = feature


# =============================================================================
# Not Found Exceptions
# =============================================================================

class ForecastNotFoundError(WeatherServiceException):
    """Raised when a forecast ID doesn't exist."""

    def __init__(self, forecast_id: int):
        super().__init__(
            message=f"Weather forecast not found: {forecast_id}",
            code="FORECAST_NOT_FOUND",
            status_code=404,
            suggestion="Check that the forecast id is correct and the forecast hasn't been deleted",
            details={"forecast_id": forecast_id},
        )
        self.forecast_id = forecast_id


class ForecastForDateNotFoundError(WeatherServiceException):
    """Raised at the API layer when no forecast matches a location and date."""

    def __init__(self, location_id: int, date: str):
        super().__init__(
            message=f"The forecast at location {location_id} on date {date} could not be found.",
            code="FORECAST_NOT_FOUND",
            status_code=404,
            details={"location_id": location_id, "date": date},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def weather_service_exception_handler(
    request: Request,
    exc: WeatherServiceException
) -> JSONResponse:
    """
    Convert WeatherServiceException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic request validation errors.

    FastAPI's RequestValidationError exposes errors(); anything else is
    stringified.
    """
    errors = exc.errors() if hasattr(exc, "errors") else str(exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_errors(errors),
        }
    )


def jsonable_errors(errors: Any) -> Any:
    """Make pydantic error lists JSON-safe (ctx may hold exception objects)."""
    if not isinstance(errors, list):
        return errors
    cleaned = []
    for error in errors:
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        cleaned.append(error)
    return jsonable_encoder(cleaned)

# =============================================================================
# app/routers/forecasts.py - Weather Forecast CRUD Endpoints
# =============================================================================
# Thin HTTP layer over ForecastService:
# - request bodies are validated by Pydantic (422 on bad shape)
# - view models are mapped into domain objects (400 on broken invariants)
# - responses always report temperatures in Celsius
# =============================================================================

import logging
from datetime import date as Date
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from app.dependencies import ForecastServiceDep, require_feature
from app.exceptions import ForecastForDateNotFoundError, InvalidRequestError
from core.mappers import forecast_from_view, forecast_to_view, location_from_view
from core.models.forecast import to_month_day_year
from core.models.schemas import (
    CreateWeatherForecastRequest,
    DeleteWeatherForecastResponse,
    ListWeatherForecastsResponse,
    UpdateWeatherForecastRequest,
    WeatherForecastResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=ListWeatherForecastsResponse)
async def list_forecasts(service: ForecastServiceDep):
    """
    List all weather forecasts.

    No ordering is guaranteed.
    """
    forecasts = await service.list_forecasts()

    return ListWeatherForecastsResponse(
        weather_forecasts=[forecast_to_view(f) for f in forecasts]
    )


@router.get(
    "/by-date",
    response_model=WeatherForecastResponse,
    dependencies=[Depends(require_feature("ALLOW_GET_FORECAST_BY_DATE"))],
)
async def get_forecast_for_date(
    service: ForecastServiceDep,
    location_id: Annotated[int, Query(description="Location id")],
    date: Annotated[Date, Query(description="Forecast date (YYYY-MM-DD)")],
):
    """
    Get the forecast for a location on a date.

    Feature-gated by ALLOW_GET_FORECAST_BY_DATE; returns 404 when disabled
    or when no forecast matches.
    """
    logger.info(f"Requesting weather forecast for location {location_id} on date {date}")

    forecast = await service.get_forecast_for_date(location_id, date)
    if forecast is None:
        raise ForecastForDateNotFoundError(location_id, to_month_day_year(date))

    return WeatherForecastResponse(forecast=forecast_to_view(forecast))


@router.get("/{forecast_id}", response_model=WeatherForecastResponse)
async def get_forecast(
    forecast_id: Annotated[int, Path(description="Forecast id")],
    service: ForecastServiceDep,
):
    """
    Get a forecast by id.

    Returns 400 for non-positive ids and 404 for unknown ones.
    """
    forecast = await service.get_forecast_by_id(forecast_id)

    return WeatherForecastResponse(forecast=forecast_to_view(forecast))


@router.post("", response_model=WeatherForecastResponse)
async def create_forecast(
    request: CreateWeatherForecastRequest,
    service: ForecastServiceDep,
):
    """
    Create a new forecast.

    The temperature may be given in any scale; the stored and returned
    value is Celsius.
    """
    location = location_from_view(request.location)

    forecast = await service.create_forecast(
        location=location,
        date=request.date,
        temperature=request.temperature,
        scale=request.scale,
        summary=request.summary,
    )

    return WeatherForecastResponse(forecast=forecast_to_view(forecast))


@router.put("/{forecast_id}", response_model=WeatherForecastResponse)
async def update_forecast(
    forecast_id: Annotated[int, Path(description="Forecast id")],
    request: UpdateWeatherForecastRequest,
    service: ForecastServiceDep,
):
    """
    Replace a forecast.

    The body's forecast id must match the path id. Updating an id that
    doesn't exist yet creates it.
    """
    if request.weather_forecast.id != forecast_id:
        raise InvalidRequestError(
            f"Forecast id {request.weather_forecast.id} in the body does not match "
            f"id {forecast_id} in the path.",
            "id",
        )

    forecast = forecast_from_view(request.weather_forecast)
    updated = await service.update_forecast(forecast)

    return WeatherForecastResponse(forecast=forecast_to_view(updated))


@router.delete("/{forecast_id}", response_model=DeleteWeatherForecastResponse)
async def delete_forecast(
    forecast_id: Annotated[int, Path(description="Forecast id")],
    service: ForecastServiceDep,
):
    """
    Delete a forecast.

    Deleting a forecast that doesn't exist is not an error;
    the response just reports deleted=false.
    """
    deleted = await service.delete_forecast(forecast_id)

    return DeleteWeatherForecastResponse(deleted=deleted)

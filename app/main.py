# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Weather Forecast API.
# It configures the FastAPI application with middleware, routers, handlers
# and the forecast stores the routers read and write.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.exceptions import (
    WeatherServiceException,
    validation_exception_handler,
    weather_service_exception_handler,
)
from app.middleware import RequestLoggingMiddleware
from app.routers import forecasts, health
from lib.forecast_store import ExperimentalForecastStore, InMemoryForecastStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The stores already exist (create_app builds them); this only reports
    startup and shutdown.
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting Weather Forecast API in {app_settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {app_settings.cors_origins_list}")
    logger.info(
        f"Feature flags: USE_EXPERIMENTAL_REPOSITORY={app_settings.USE_EXPERIMENTAL_REPOSITORY}, "
        f"ALLOW_GET_FORECAST_BY_DATE={app_settings.ALLOW_GET_FORECAST_BY_DATE}"
    )

    yield

    # Shutdown
    logger.info("Shutting down Weather Forecast API")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Each call gets its own settings and its own forecast stores, so tests
    can create isolated apps with different feature flags.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Weather Forecast API",
        description="""
## Weather Forecast CRUD API

Create, read, update and delete weather forecasts for named locations.

### Temperatures

Temperatures can be sent in Celsius, Fahrenheit or Kelvin
(`c`, `f`, `k`, `celsius`, `fahrenheit`, `kelvin`, case insensitive).
They are stored and returned in Celsius. Readings below absolute zero
are rejected.

### Feature Flags

| Flag | Effect |
|------|--------|
| `USE_EXPERIMENTAL_REPOSITORY` | Serve requests from the experimental store |
| `ALLOW_GET_FORECAST_BY_DATE` | Enable `GET /forecasts/by-date` |
""",
        version=health.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Forecasts",
                "description": "Create and manage weather forecasts",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------
    # Both stores live for the lifetime of the app; dependencies pick one
    # per request.

    app.state.settings = app_settings
    app.state.forecast_store = InMemoryForecastStore(seed=app_settings.SEED_SAMPLE_DATA)
    app.state.experimental_store = ExperimentalForecastStore(
        suffix=app_settings.V2_REPOSITORY_SUFFIX,
        seed=app_settings.SEED_SAMPLE_DATA,
    )

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging (path, length, small bodies)
    app.add_middleware(RequestLoggingMiddleware)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    @app.exception_handler(WeatherServiceException)
    async def handle_weather_service_exception(request: Request, exc: WeatherServiceException):
        """Handle custom Weather Forecast exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.code}: {exc.message}")
        return await weather_service_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_exception(request: Request, exc: RequestValidationError):
        """Handle request body/query validation errors."""
        return await validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    # Health check endpoints
    app.include_router(
        health.router,
        prefix="/api/v1",
        tags=["Health"]
    )

    # Forecast CRUD endpoints
    app.include_router(
        forecasts.router,
        prefix="/api/v1/forecasts",
        tags=["Forecasts"]
    )

    # -------------------------------------------------------------------------
    # Root Endpoint
    # -------------------------------------------------------------------------

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Weather Forecast API",
            "version": health.VERSION,
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


# Create FastAPI application
app = create_app()

# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The forecast stores are created once by create_app() and kept on
# app.state; which one serves a request is decided per request from the
# USE_EXPERIMENTAL_REPOSITORY flag.
# =============================================================================

import logging
from typing import Annotated, Callable

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import FeatureDisabledError
from core.services.forecast_service import ForecastService
from lib.forecast_store import ForecastStore

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running app was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_forecast_store(request: Request, settings: SettingsDep) -> ForecastStore:
    """
    Pick the forecast store for this request.

    Returns the experimental store when USE_EXPERIMENTAL_REPOSITORY is on,
    the standard store otherwise.
    """
    if settings.USE_EXPERIMENTAL_REPOSITORY:
        return request.app.state.experimental_store
    return request.app.state.forecast_store


ForecastStoreDep = Annotated[ForecastStore, Depends(get_forecast_store)]


def get_forecast_service(store: ForecastStoreDep) -> ForecastService:
    """Build a ForecastService over the selected store."""
    return ForecastService(reader=store, writer=store)


ForecastServiceDep = Annotated[ForecastService, Depends(get_forecast_service)]


def require_feature(flag: str) -> Callable[[Request, Settings], None]:
    """
    Dependency factory that gates an endpoint behind a boolean setting.

    Usage:
        @router.get("/x", dependencies=[Depends(require_feature("ALLOW_X"))])

    Raises:
        FeatureDisabledError: If the flag is off (rendered as 404)
    """

    def check(request: Request, settings: SettingsDep) -> None:
        if not getattr(settings, flag):
            client_host = request.client.host if request.client else "unknown"
            logger.warning(
                f"Caller with IP Address {client_host} attempted to access feature {flag} but was blocked."
            )
            raise FeatureDisabledError(flag)

    return check

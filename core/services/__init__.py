# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .forecast_service import ForecastService

__all__ = [
    "ForecastService",
]

# =============================================================================
# lib/ - Standalone Infrastructure Modules
# =============================================================================
# This package contains reusable infrastructure:
# - forecast_store.py: Reader/writer interfaces and in-memory forecast stores
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.forecast_store import (
    ExperimentalForecastStore,
    ForecastReader,
    ForecastStore,
    ForecastWriter,
    InMemoryForecastStore,
)

__all__ = [
    "ExperimentalForecastStore",
    "ForecastReader",
    "ForecastStore",
    "ForecastWriter",
    "InMemoryForecastStore",
]

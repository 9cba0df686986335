# =============================================================================
# lib/forecast_store.py - In-Memory Forecast Store
# =============================================================================
# The persistence layer for forecast records: a dict keyed by forecast id,
# guarded by a lock so concurrent requests never see a torn write or get
# the same id twice.
#
# Interfaces:
# - ForecastReader: list_forecasts, get_by_id, get_by_location_and_date
# - ForecastWriter: create, update, delete
#
# Implementations (interchangeable, selected per request by feature flag):
# - InMemoryForecastStore: the standard store
# - ExperimentalForecastStore: appends a configured suffix to summaries
#
# Stores are plain objects owned by whoever constructs them (the FastAPI
# app keeps its instances on app.state). Nothing here is module-global.
#
# Usage:
#   store = InMemoryForecastStore(seed=True)
#   record = await store.create(location, "6/1/2020", "Balmy", Decimal("20"))
# =============================================================================

from __future__ import annotations

import logging
import random
import threading
from abc import ABC, abstractmethod
from decimal import Decimal

from app.exceptions import ForecastNotFoundError
from core.models.forecast import check_summary
from core.models.stored import StoredForecast, StoredLocation

logger = logging.getLogger(__name__)


SUMMARIES = [
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
]

# Sample record loaded when a store is seeded
SEED_LOCATION = StoredLocation(
    id=1,
    latitude=42.166679,
    longitude=-83.781319,
    name="Saline, MI",
)
SEED_DATE = "5/29/2020"
SEED_TEMPERATURE_C = Decimal("20")


# =============================================================================
# Interfaces
# =============================================================================

class ForecastReader(ABC):
    """Read side of forecast storage."""

    @abstractmethod
    async def list_forecasts(self) -> list[StoredForecast]:
        """Snapshot of every stored forecast, in no particular order."""

    @abstractmethod
    async def get_by_id(self, forecast_id: int) -> StoredForecast:
        """
        Fetch one forecast.

        Raises:
            ForecastNotFoundError: If no forecast has this id
        """

    @abstractmethod
    async def get_by_location_and_date(
        self,
        location_id: int,
        date: str,
    ) -> StoredForecast | None:
        """
        Find the forecast for a location on a month/day/year date.

        Returns None when nothing matches; absence is not an error here.
        """


class ForecastWriter(ABC):
    """Write side of forecast storage."""

    @abstractmethod
    async def create(
        self,
        location: StoredLocation,
        date: str,
        summary: str,
        temperature_c: Decimal,
    ) -> StoredForecast:
        """Store a new forecast under a freshly assigned id."""

    @abstractmethod
    async def update(self, forecast: StoredForecast) -> StoredForecast:
        """Create or replace the forecast stored under forecast.id."""

    @abstractmethod
    async def delete(self, forecast_id: int) -> bool:
        """Remove a forecast. Returns False if there was nothing to remove."""


class ForecastStore(ForecastReader, ForecastWriter, ABC):
    """Combined reader and writer."""


# =============================================================================
# Implementations
# =============================================================================

class InMemoryForecastStore(ForecastStore):
    """
    Dict-backed forecast store.

    Every operation takes the lock for its in-memory work only; nothing
    awaits while holding it. Last writer wins for the same id.
    """

    def __init__(self, seed: bool = False):
        self._forecasts: dict[int, StoredForecast] = {}
        self._lock = threading.Lock()

        if seed:
            self._seed()

    # -------------------------------------------------------------------------
    # Reader
    # -------------------------------------------------------------------------

    async def list_forecasts(self) -> list[StoredForecast]:
        with self._lock:
            return list(self._forecasts.values())

    async def get_by_id(self, forecast_id: int) -> StoredForecast:
        with self._lock:
            forecast = self._forecasts.get(forecast_id)

        if forecast is None:
            raise ForecastNotFoundError(forecast_id)

        return forecast

    async def get_by_location_and_date(
        self,
        location_id: int,
        date: str,
    ) -> StoredForecast | None:
        with self._lock:
            candidates = list(self._forecasts.values())

        # Scan everything; if several records share location + date,
        # the last one in iteration order wins
        match = None
        for forecast in candidates:
            if forecast.location.id == location_id and forecast.date == date:
                match = forecast

        return match

    # -------------------------------------------------------------------------
    # Writer
    # -------------------------------------------------------------------------

    async def create(
        self,
        location: StoredLocation,
        date: str,
        summary: str,
        temperature_c: Decimal,
    ) -> StoredForecast:
        summary = self._decorate_summary(summary)

        with self._lock:
            forecast = StoredForecast(
                id=self._next_id(),
                location=location,
                date=date,
                summary=summary,
                temperature_c=temperature_c,
            )
            self._forecasts[forecast.id] = forecast

        logger.debug(f"Stored forecast {forecast.id} for location {location.id} on {date}")
        return forecast

    async def update(self, forecast: StoredForecast) -> StoredForecast:
        forecast = forecast.model_copy(
            update={"summary": self._decorate_summary(forecast.summary)}
        )

        with self._lock:
            self._forecasts[forecast.id] = forecast

        return forecast

    async def delete(self, forecast_id: int) -> bool:
        with self._lock:
            return self._forecasts.pop(forecast_id, None) is not None

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _next_id(self) -> int:
        """max(existing ids) + 1, or 1 when empty. Caller holds the lock."""
        return max(self._forecasts, default=0) + 1

    def _decorate_summary(self, summary: str) -> str:
        """Hook for variants that rewrite summaries on write."""
        return summary

    def _seed_location(self) -> StoredLocation:
        return SEED_LOCATION

    def _seed(self) -> None:
        """Load the sample forecast under id 1."""
        forecast = StoredForecast(
            id=1,
            location=self._seed_location(),
            date=SEED_DATE,
            summary=random.choice(SUMMARIES),
            temperature_c=SEED_TEMPERATURE_C,
        )
        with self._lock:
            self._forecasts[forecast.id] = forecast

        logger.info(f"Seeded {type(self).__name__} with sample forecast {forecast.id}")


class ExperimentalForecastStore(InMemoryForecastStore):
    """
    Variant store that tags everything it writes with a suffix.

    The suffix is appended to summaries on create and update, and to the
    name of the seeded location, so responses show which store served them.
    A write whose suffixed summary would exceed the summary limit is
    rejected with ForecastValidationError and nothing is stored.
    """

    def __init__(self, suffix: str, seed: bool = False):
        self.suffix = suffix
        super().__init__(seed=seed)

    def _decorate_summary(self, summary: str) -> str:
        decorated = summary + self.suffix
        # Refuse before writing; the suffixed summary must still rebuild
        check_summary(decorated)
        return decorated

    def _seed_location(self) -> StoredLocation:
        return SEED_LOCATION.model_copy(update={"name": SEED_LOCATION.name + self.suffix})

# =============================================================================
# core/models/location.py - Location Value Model
# =============================================================================
# A named geographic point. Immutable and validated at construction:
# - id: non-negative integer
# - latitude: -90..90 (inclusive)
# - longitude: -180..180 (inclusive)
# - name: non-empty, at most 1000 characters
# =============================================================================

from dataclasses import dataclass

from app.exceptions import LocationCreationError

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

MAX_NAME_LENGTH = 1000


@dataclass(frozen=True)
class Location:
    """
    Immutable location value.

    Raises LocationCreationError naming the violated constraint; there is
    no way to obtain a partially valid Location.
    """
    id: int
    latitude: float
    longitude: float
    name: str

    def __post_init__(self):
        if self.id < 0:
            raise LocationCreationError(
                f"ID must be a non-negative integer, but found {self.id}.", "id"
            )

        # Written as "not within" so NaN fails too
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise LocationCreationError(
                f"Latitude must be between {MIN_LATITUDE} and {MAX_LATITUDE}, but found {self.latitude}.",
                "latitude",
            )

        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise LocationCreationError(
                f"Longitude must be between {MIN_LONGITUDE} and {MAX_LONGITUDE}, but found {self.longitude}.",
                "longitude",
            )

        if not self.name:
            raise LocationCreationError("Location name cannot be null or empty.", "name")

        if len(self.name) > MAX_NAME_LENGTH:
            raise LocationCreationError(
                f"Location name cannot be longer than {MAX_NAME_LENGTH} characters.", "name"
            )

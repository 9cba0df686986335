# =============================================================================
# core/models/temperature.py - Temperature Value Model
# =============================================================================
# A temperature is a Decimal value tagged with the scale it is expressed in.
#
# - Scale: enum of supported scales (plus UNKNOWN for unparseable tokens)
# - Temperature: immutable value, validated once at construction
# - Celsius / Fahrenheit / Kelvin: constructors for each variant
#
# The absolute-zero floor of each scale is constant data (ABSOLUTE_ZERO),
# and conversions are looked up in a table keyed by (source, target) scale.
# All arithmetic stays in Decimal so that e.g. 20 C -> 68 F -> 20 C is exact.
#
# Usage:
#   from core.models.temperature import Temperature
#   temp = Temperature.from_value(68, "f")
#   temp.to_celsius().value  # Decimal("20")
# =============================================================================

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Union

from app.exceptions import InvalidScaleError, TemperatureOutOfRangeError


class Scale(str, Enum):
    """
    Temperature scales.

    UNKNOWN exists so a failed token lookup has a value to report,
    but no Temperature can ever be constructed with it.
    """
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"
    UNKNOWN = "unknown"


# Absolute zero expressed in each scale (inclusive lower bound)
ABSOLUTE_ZERO: dict[Scale, Decimal] = {
    Scale.CELSIUS: Decimal("-273.15"),
    Scale.FAHRENHEIT: Decimal("-459.67"),
    Scale.KELVIN: Decimal("0"),
}

# Ceiling for any temperature value; practically unbounded
MAX_TEMPERATURE = Decimal("79228162514264337593543950335")

# Short and long scale tokens, matched case-insensitively
SCALE_TOKENS: dict[str, Scale] = {
    "c": Scale.CELSIUS,
    "celsius": Scale.CELSIUS,
    "f": Scale.FAHRENHEIT,
    "fahrenheit": Scale.FAHRENHEIT,
    "k": Scale.KELVIN,
    "kelvin": Scale.KELVIN,
}

_KELVIN_OFFSET = Decimal("273.15")
_RANKINE_OFFSET = Decimal("459.67")

# (source, target) -> conversion of the raw value
_CONVERSIONS: dict[tuple[Scale, Scale], Callable[[Decimal], Decimal]] = {
    (Scale.CELSIUS, Scale.KELVIN): lambda v: v + _KELVIN_OFFSET,
    (Scale.CELSIUS, Scale.FAHRENHEIT): lambda v: v * 9 / 5 + 32,
    (Scale.FAHRENHEIT, Scale.CELSIUS): lambda v: (v - 32) * 5 / 9,
    (Scale.FAHRENHEIT, Scale.KELVIN): lambda v: (v + _RANKINE_OFFSET) * 5 / 9,
    (Scale.KELVIN, Scale.CELSIUS): lambda v: v - _KELVIN_OFFSET,
    (Scale.KELVIN, Scale.FAHRENHEIT): lambda v: v * 9 / 5 - _RANKINE_OFFSET,
}

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Coerce a raw number into a Decimal.

    Floats go through str() so 20.1 becomes Decimal("20.1") rather than
    the binary expansion 20.10000000000000142...
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def parse_scale(token: str | None) -> Scale:
    """
    Resolve a scale token to a Scale.

    Returns Scale.UNKNOWN for anything unrecognized (including "unknown").
    """
    if not isinstance(token, str):
        return Scale.UNKNOWN
    return SCALE_TOKENS.get(token.strip().lower(), Scale.UNKNOWN)


def is_valid_scale(token: str | None) -> bool:
    """Check whether a token names a usable scale."""
    return parse_scale(token) is not Scale.UNKNOWN


@dataclass(frozen=True)
class Temperature:
    """
    Immutable, scale-aware temperature.

    Construction validates value against the scale's absolute zero and
    MAX_TEMPERATURE. Nothing re-checks it afterwards; conversions build
    new instances, which are validated in turn.
    """
    value: Decimal
    scale: Scale

    def __post_init__(self):
        # Normalize input without breaking immutability
        if not isinstance(self.scale, Scale):
            object.__setattr__(self, "scale", parse_scale(self.scale))

        if self.scale not in ABSOLUTE_ZERO:
            raise InvalidScaleError(getattr(self.scale, "value", self.scale))

        try:
            value = to_decimal(self.value)
        except (InvalidOperation, TypeError, ValueError):
            raise TemperatureOutOfRangeError(
                self.value,
                self.scale.value,
                f"Temperature value {self.value!r} is not a number.",
            ) from None

        # NaN and infinities have no place on any scale
        if not value.is_finite():
            raise TemperatureOutOfRangeError(
                value,
                self.scale.value,
                f"Temperature value {value} is not a finite number.",
            )
        object.__setattr__(self, "value", value)

        if self.value < ABSOLUTE_ZERO[self.scale]:
            raise TemperatureOutOfRangeError(
                self.value,
                self.scale.value,
                f"Temperature value {self.value} is below the minimum value for a "
                f"temperature reading using the {self.scale.value} scale.",
            )

        if self.value > MAX_TEMPERATURE:
            raise TemperatureOutOfRangeError(
                self.value,
                self.scale.value,
                f"Temperature value {self.value} is above the maximum value for a "
                f"temperature reading using the {self.scale.value} scale.",
            )

    @classmethod
    def from_value(cls, raw_value: Number, scale_token: str) -> "Temperature":
        """
        Build a temperature from a raw number and a scale token.

        Args:
            raw_value: The reading, in the scale named by scale_token
            scale_token: "c", "f", "k", "celsius", "fahrenheit" or "kelvin"
                (case insensitive)

        Raises:
            InvalidScaleError: If the token is not a known scale
            TemperatureOutOfRangeError: If the value is not a finite number
                or is below absolute zero
        """
        scale = parse_scale(scale_token)
        if scale is Scale.UNKNOWN:
            raise InvalidScaleError(scale_token)
        return cls(raw_value, scale)

    def convert_to(self, scale: Scale) -> "Temperature":
        """Convert to another scale. Same-scale conversion returns self."""
        if scale is self.scale:
            return self
        try:
            conversion = _CONVERSIONS[(self.scale, scale)]
        except KeyError:
            raise InvalidScaleError(getattr(scale, "value", scale)) from None
        return Temperature(conversion(self.value), scale)

    def to_celsius(self) -> "Temperature":
        return self.convert_to(Scale.CELSIUS)

    def to_fahrenheit(self) -> "Temperature":
        return self.convert_to(Scale.FAHRENHEIT)

    def to_kelvin(self) -> "Temperature":
        return self.convert_to(Scale.KELVIN)

    def __str__(self) -> str:
        return f"{self.value} {self.scale.value}"


def Celsius(value: Number) -> Temperature:
    """Temperature in degrees Celsius."""
    return Temperature(value, Scale.CELSIUS)


def Fahrenheit(value: Number) -> Temperature:
    """Temperature in degrees Fahrenheit."""
    return Temperature(value, Scale.FAHRENHEIT)


def Kelvin(value: Number) -> Temperature:
    """Temperature in kelvin."""
    return Temperature(value, Scale.KELVIN)

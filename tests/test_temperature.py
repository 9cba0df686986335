# =============================================================================
# tests/test_temperature.py - Temperature Value Model Tests
# =============================================================================
# Unit tests for the Temperature model to ensure:
# - Scale tokens are parsed case-insensitively (short and long forms)
# - Values below absolute zero are rejected; the floor itself is accepted
# - Conversions use the exact formulas and round-trip without drift
#
# Run with: poetry run pytest tests/test_temperature.py -v
# =============================================================================

from decimal import Decimal

import pytest

from app.exceptions import InvalidScaleError, TemperatureOutOfRangeError
from core.models.temperature import (
    MAX_TEMPERATURE,
    Celsius,
    Fahrenheit,
    Kelvin,
    Scale,
    Temperature,
    is_valid_scale,
    parse_scale,
)


# =============================================================================
# Scale Parsing Tests
# =============================================================================

class TestScaleParsing:
    """Tests for scale token handling."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("c", Scale.CELSIUS),
            ("C", Scale.CELSIUS),
            ("celsius", Scale.CELSIUS),
            ("Celsius", Scale.CELSIUS),
            ("f", Scale.FAHRENHEIT),
            ("FAHRENHEIT", Scale.FAHRENHEIT),
            ("k", Scale.KELVIN),
            ("Kelvin", Scale.KELVIN),
        ],
    )
    def test_known_tokens(self, token, expected):
        """Short and long forms resolve regardless of case."""
        assert parse_scale(token) is expected
        assert is_valid_scale(token)

    @pytest.mark.parametrize("token", ["unknown", "x", "", "rankine", None])
    def test_unknown_tokens(self, token):
        """Anything else resolves to UNKNOWN."""
        assert parse_scale(token) is Scale.UNKNOWN
        assert not is_valid_scale(token)

    def test_from_value_rejects_unknown_scale(self):
        """from_value refuses tokens that don't name a scale."""
        with pytest.raises(InvalidScaleError):
            Temperature.from_value(10, "unknown")

        with pytest.raises(InvalidScaleError):
            Temperature.from_value(10, "r")

    def test_from_value_builds_requested_scale(self):
        temp = Temperature.from_value(Decimal("68"), "F")

        assert temp.scale is Scale.FAHRENHEIT
        assert temp.value == Decimal("68")

    def test_cannot_construct_unknown_scale(self):
        with pytest.raises(InvalidScaleError):
            Temperature(Decimal("1"), Scale.UNKNOWN)


# =============================================================================
# Validation Tests
# =============================================================================

class TestTemperatureValidation:
    """Tests for the absolute-zero floor and the ceiling."""

    def test_celsius_below_absolute_zero(self):
        with pytest.raises(TemperatureOutOfRangeError) as exc_info:
            Celsius(-300)

        assert exc_info.value.value == Decimal("-300")
        assert exc_info.value.scale == "celsius"
        assert exc_info.value.status_code == 400

    def test_kelvin_below_zero(self):
        with pytest.raises(TemperatureOutOfRangeError):
            Kelvin(-1)

    def test_fahrenheit_below_absolute_zero(self):
        with pytest.raises(TemperatureOutOfRangeError):
            Fahrenheit(Decimal("-459.68"))

    @pytest.mark.parametrize(
        "factory, floor",
        [
            (Celsius, Decimal("-273.15")),
            (Fahrenheit, Decimal("-459.67")),
            (Kelvin, Decimal("0")),
        ],
    )
    def test_absolute_zero_is_inclusive(self, factory, floor):
        """The floor itself is a valid reading."""
        assert factory(floor).value == floor

    def test_above_maximum(self):
        with pytest.raises(TemperatureOutOfRangeError):
            Celsius(MAX_TEMPERATURE + 1)

    @pytest.mark.parametrize("value", ["abc", "", None])
    def test_non_numeric_value(self, value):
        with pytest.raises(TemperatureOutOfRangeError) as exc_info:
            Temperature.from_value(value, "c")

        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize(
        "value",
        [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), Decimal("-Infinity"), float("nan"), "inf"],
    )
    def test_non_finite_value(self, value):
        with pytest.raises(TemperatureOutOfRangeError):
            Celsius(value)

    def test_unknown_scale_reported_before_bad_value(self):
        with pytest.raises(InvalidScaleError):
            Temperature("abc", "rankine")

    def test_float_input_is_not_binary_expanded(self):
        """20.1 stays 20.1, not 20.100000000000001421..."""
        assert Celsius(20.1).value == Decimal("20.1")

    def test_immutable(self):
        temp = Celsius(20)

        with pytest.raises(AttributeError):
            temp.value = Decimal("30")


# =============================================================================
# Conversion Tests
# =============================================================================

class TestTemperatureConversion:
    """Tests for conversions between scales."""

    def test_celsius_to_fahrenheit(self):
        assert Celsius(20).to_fahrenheit().value == Decimal("68")

    def test_celsius_to_kelvin(self):
        assert Celsius(20).to_kelvin().value == Decimal("293.15")

    def test_fahrenheit_to_celsius(self):
        assert Fahrenheit(212).to_celsius().value == Decimal("100")

    def test_fahrenheit_to_kelvin(self):
        assert Fahrenheit(32).to_kelvin().value == Decimal("273.15")

    def test_kelvin_to_celsius(self):
        assert Kelvin(0).to_celsius().value == Decimal("-273.15")

    def test_kelvin_to_fahrenheit(self):
        assert Kelvin(0).to_fahrenheit().value == Decimal("-459.67")

    def test_conversion_returns_new_value_with_target_scale(self):
        celsius = Celsius(20)
        fahrenheit = celsius.to_fahrenheit()

        assert fahrenheit.scale is Scale.FAHRENHEIT
        assert celsius.scale is Scale.CELSIUS
        assert celsius.value == Decimal("20")

    @pytest.mark.parametrize("factory", [Celsius, Fahrenheit, Kelvin])
    def test_identity_conversion(self, factory):
        temp = factory(300)

        assert temp.convert_to(temp.scale) == temp

    @pytest.mark.parametrize("value", ["20", "-40", "0", "21.5", "-273.15", "100"])
    def test_celsius_fahrenheit_round_trip(self, value):
        """C -> F -> C reproduces the original exactly."""
        original = Celsius(Decimal(value))

        assert original.to_fahrenheit().to_celsius().value == original.value

    @pytest.mark.parametrize("value", ["20", "0", "293.15", "1000"])
    def test_kelvin_celsius_round_trip(self, value):
        original = Kelvin(Decimal(value))

        assert original.to_celsius().to_kelvin().value == original.value

    @pytest.mark.parametrize("value", ["32", "212", "-40", "68"])
    def test_fahrenheit_kelvin_round_trip(self, value):
        original = Fahrenheit(Decimal(value))

        assert original.to_kelvin().to_fahrenheit().value == original.value

    def test_from_value_to_celsius_chain(self):
        """fromValue(...).toCelsius().toFahrenheit().toCelsius() keeps the Celsius value."""
        celsius = Temperature.from_value(68, "f").to_celsius()

        assert celsius.to_fahrenheit().to_celsius().value == celsius.value == Decimal("20")

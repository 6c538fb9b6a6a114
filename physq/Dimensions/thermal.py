from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions

RANKINE = 1.0 / 1.8


class TemperatureUnit(Unit):
    """Units of absolute temperature. The standard unit is the kelvin. Celsius and Fahrenheit are offset
    scales: ``to_standard`` applies both the scale and the offset, and offset conversions keep 15 significant
    digits of the offset so that 32 °F is exactly 0 °C."""

    Kelvin = "K"
    Celsius = "°C", 1.0, 273.15
    Rankine = "°R", RANKINE
    Fahrenheit = "°F", RANKINE, 459.67 * RANKINE


TemperatureUnit.define(
    TemperatureUnit.Kelvin,
    Dimensions(temperature=1),
    spellings={
        TemperatureUnit.Kelvin: ("kelvin",),
        TemperatureUnit.Celsius: ("C", "celsius"),
        TemperatureUnit.Rankine: ("R", "rankine"),
        TemperatureUnit.Fahrenheit: ("F", "fahrenheit"),
    },
    systems=(TemperatureUnit.Kelvin, TemperatureUnit.Kelvin, TemperatureUnit.Rankine, TemperatureUnit.Rankine),
)


class TemperatureDifferenceUnit(Unit):
    """Units of temperature difference. A difference of one degree Celsius equals one kelvin."""

    Kelvin = "K"
    Celsius = "°C"
    Rankine = "°R", RANKINE
    Fahrenheit = "°F", RANKINE


TemperatureDifferenceUnit.define(
    TemperatureDifferenceUnit.Kelvin,
    Dimensions(temperature=1),
    spellings={
        TemperatureDifferenceUnit.Kelvin: ("kelvin", "ΔK"),
        TemperatureDifferenceUnit.Celsius: ("C", "Δ°C"),
        TemperatureDifferenceUnit.Rankine: ("R", "Δ°R"),
        TemperatureDifferenceUnit.Fahrenheit: ("F", "Δ°F"),
    },
    systems=(
        TemperatureDifferenceUnit.Kelvin,
        TemperatureDifferenceUnit.Kelvin,
        TemperatureDifferenceUnit.Rankine,
        TemperatureDifferenceUnit.Rankine,
    ),
)


class ReciprocalTemperatureUnit(Unit):
    """Units of reciprocal temperature, as used by thermal expansion coefficients."""

    PerKelvin = "/K"
    PerCelsius = "/°C"
    PerRankine = "/°R", 1.0 / RANKINE
    PerFahrenheit = "/°F", 1.0 / RANKINE


ReciprocalTemperatureUnit.define(
    ReciprocalTemperatureUnit.PerKelvin,
    Dimensions(temperature=-1),
    spellings={
        ReciprocalTemperatureUnit.PerKelvin: ("1/K", "K^-1"),
        ReciprocalTemperatureUnit.PerCelsius: ("1/°C", "°C^-1"),
        ReciprocalTemperatureUnit.PerRankine: ("1/°R", "°R^-1"),
        ReciprocalTemperatureUnit.PerFahrenheit: ("1/°F", "°F^-1"),
    },
    systems=(
        ReciprocalTemperatureUnit.PerKelvin,
        ReciprocalTemperatureUnit.PerKelvin,
        ReciprocalTemperatureUnit.PerRankine,
        ReciprocalTemperatureUnit.PerRankine,
    ),
)


class TemperatureDifference(DimensionalScalar, unit=TemperatureDifferenceUnit):
    """A difference between two temperatures. Unlike :class:`Temperature`, converting it never applies an
    offset: a difference of 9 °F is a difference of 5 K."""


class Temperature(DimensionalScalar, unit=TemperatureUnit):
    """
    An absolute temperature, e.g. ``Temperature(20.0, TemperatureUnit.Celsius)``.

    Subtracting two temperatures yields a :class:`TemperatureDifference`, and a temperature shifted by a
    difference stays a temperature.
    """


class LinearThermalExpansionCoefficient(DimensionalScalar, unit=ReciprocalTemperatureUnit):
    """The strain of a material per unit of temperature change along one direction."""


class VolumetricThermalExpansionCoefficient(DimensionalScalar, unit=ReciprocalTemperatureUnit):
    """The relative change in volume of a material per unit of temperature change."""

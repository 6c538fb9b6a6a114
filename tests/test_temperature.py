import pytest
from pytest import approx

from physq import (
    LinearThermalExpansionCoefficient,
    ReciprocalTemperatureUnit,
    Temperature,
    TemperatureDifference,
    TemperatureDifferenceUnit,
    TemperatureUnit,
)


@pytest.fixture
def freezing():
    return Temperature(0.0, TemperatureUnit.Celsius)


class TestTemperature:
    def test_offset_scales(self, freezing):
        assert freezing.value == approx(273.15)
        assert freezing.value_in(TemperatureUnit.Fahrenheit) == approx(32.0)
        assert Temperature(32.0, TemperatureUnit.Fahrenheit).value_in(TemperatureUnit.Celsius) == approx(0.0, abs=1e-9)
        assert Temperature(491.67, TemperatureUnit.Rankine).value == approx(273.15)
        assert TemperatureUnit.Celsius(100.0).value_in(TemperatureUnit.Kelvin) == approx(373.15)

    def test_print(self, freezing):
        assert freezing.print(TemperatureUnit.Celsius) == "0.000000000000000 °C"
        assert Temperature(300.0).print() == "300.000000000000000 K"

    def test_freezing_point_is_exact(self, freezing):
        assert Temperature(32.0, "°F").print(TemperatureUnit.Celsius) == "0.000000000000000 °C"
        assert freezing.print(TemperatureUnit.Fahrenheit) == "32.000000000000000 °F"
        assert freezing.static_value(TemperatureUnit.Fahrenheit) == 32.0
        assert Temperature.create(TemperatureUnit.Fahrenheit, 32.0).value_in(TemperatureUnit.Celsius) == 0.0
        assert Temperature(-40.0, TemperatureUnit.Celsius).value_in(TemperatureUnit.Fahrenheit) == -40.0

    def test_difference_of_temperatures(self, freezing):
        boiling = Temperature(100.0, TemperatureUnit.Celsius)
        difference = boiling - freezing
        assert isinstance(difference, TemperatureDifference)
        assert difference.value == approx(100.0)
        assert difference.value_in(TemperatureDifferenceUnit.Fahrenheit) == approx(180.0)

    def test_shift_by_difference(self, freezing):
        shifted = freezing + TemperatureDifference(10.0)
        assert isinstance(shifted, Temperature)
        assert shifted.value_in(TemperatureUnit.Celsius) == approx(10.0)
        assert isinstance(TemperatureDifference(10.0) + freezing, Temperature)
        assert (freezing - TemperatureDifference(10.0)).value_in(TemperatureUnit.Celsius) == approx(-10.0)

    def test_in_place_shift(self, freezing):
        same = freezing
        freezing += TemperatureDifference(5.0, TemperatureDifferenceUnit.Celsius)
        freezing -= TemperatureDifference(9.0, TemperatureDifferenceUnit.Fahrenheit)
        assert same is freezing
        assert freezing.value_in(TemperatureUnit.Celsius) == approx(0.0, abs=1e-9)

    def test_invalid(self, freezing):
        with pytest.raises(TypeError):
            TemperatureDifference(1.0) - freezing
        with pytest.raises(TypeError):
            freezing - 1.0


class TestTemperatureDifference:
    def test_no_offset(self):
        assert TemperatureDifference(9.0, TemperatureDifferenceUnit.Fahrenheit).value == approx(5.0)
        assert TemperatureDifference(1.0, TemperatureDifferenceUnit.Celsius).value == approx(1.0)

    def test_reciprocal_scale(self):
        coefficient = LinearThermalExpansionCoefficient(1.0, ReciprocalTemperatureUnit.PerFahrenheit)
        assert coefficient.value == approx(1.8)
        assert coefficient.value_in(ReciprocalTemperatureUnit.PerRankine) == approx(1.0)

import numpy as np
import pytest

from physq import Dimension, Dimensionless, Dimensions, Energy, Force, Speed

SPEED = Dimensions(time=-1, length=1)
ENERGY = Dimensions(time=-2, length=2, mass=1)


class TestDimension:
    def test_symbols(self):
        assert [dimension.symbol for dimension in Dimension] == ["T", "L", "M", "I", "Θ", "N", "J"]

    def test_keys(self):
        assert Dimension.ElectricCurrent.key == "electric_current"
        assert Dimension.LuminousIntensity.label == "Luminous Intensity"


class TestDimensions:
    def test_exponents(self):
        assert SPEED.time == -1
        assert SPEED.length == 1
        assert SPEED.mass == 0
        assert SPEED[Dimension.Length] == 1
        assert SPEED.exponents.dtype == np.int8
        assert list(SPEED.exponents) == [-1, 1, 0, 0, 0, 0, 0]
        assert dict(SPEED)[Dimension.Time] == -1

    def test_immutable(self):
        with pytest.raises(ValueError):
            SPEED.exponents[0] = 3
        assert SPEED.time == -1

    def test_invalid_exponent(self):
        with pytest.raises(TypeError):
            Dimensions(length=1.5)
        with pytest.raises(TypeError):
            Dimensions(length=True)
        with pytest.raises(ValueError):
            Dimensions.from_array([1, 2, 3])

    def test_dimensionless(self):
        assert Dimensionless.is_dimensionless()
        assert not SPEED.is_dimensionless()
        assert Dimensions() == Dimensionless

    def test_bookkeeping(self):
        force = Dimensions(time=-2, length=1, mass=1)
        assert force * Dimensions(length=1) == ENERGY
        assert ENERGY / Dimensions(length=1) == force
        assert SPEED**2 == Dimensions(time=-2, length=2)
        assert SPEED / SPEED == Dimensionless
        assert Dimensions(length=1) ** 0 == Dimensionless

    def test_quantity_dimensions(self):
        assert Speed.dimensions() == SPEED
        assert Energy.dimensions() == ENERGY
        assert Force.dimensions() * Speed.dimensions() == Dimensions(time=-3, length=2, mass=1)

    def test_equality_and_hash(self):
        assert Dimensions(time=-1, length=1) == SPEED
        assert SPEED != ENERGY
        assert len({SPEED, Dimensions(length=1, time=-1), ENERGY}) == 2
        assert SPEED != (-1, 1, 0, 0, 0, 0, 0)

    def test_ordering(self):
        # Lexicographic from time to luminous intensity
        assert ENERGY < SPEED
        assert Dimensions(length=1) < Dimensions(length=2)
        assert Dimensions(mass=5) < Dimensions(length=1)
        assert sorted([SPEED, Dimensionless, ENERGY]) == [ENERGY, SPEED, Dimensionless]


class TestSerialization:
    def test_print(self):
        assert SPEED.print() == "T^(-1)·L"
        assert ENERGY.print() == "T^(-2)·L^2·M"
        assert Energy.dimensions().print() == "T^(-2)·L^2·M"
        assert Dimensions(temperature=1).print() == "Θ"
        assert Dimensionless.print() == "1"
        assert str(SPEED) == "T^(-1)·L"

    def test_json(self):
        assert SPEED.json() == '{"time":-1,"length":1}'
        assert Dimensions(electric_current=1).json() == '{"electric_current":1}'
        assert Dimensionless.json() == "{}"

    def test_xml(self):
        assert SPEED.xml() == "<time>-1</time><length>1</length>"

    def test_yaml(self):
        assert SPEED.yaml() == "{time:-1,length:1}"

    def test_repr(self):
        assert repr(SPEED) == "Dimensions(time=-1, length=1)"
        assert repr(Dimensionless) == "Dimensions()"

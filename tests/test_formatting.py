import numpy as np
import pytest

from physq.utils.formatting import Precision, format_number, snake_case


class TestPrecision:
    def test_by_name(self):
        assert Precision("double") is Precision.Double
        assert Precision(" Single ") is Precision.Single
        assert Precision(15) is Precision.Double
        with pytest.raises(ValueError):
            Precision("half")

    def test_for_dtype(self):
        assert Precision.for_dtype(np.float32) is Precision.Single
        assert Precision.for_dtype(np.float64) is Precision.Double
        assert Precision.Quadruple.decimals == 33


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, "0.000000000000000"),
            (1234.5, "1234.500000000000000"),
            (-0.25, "-0.250000000000000"),
            (1.0e-3, "0.001000000000000"),
            (1.0e-4, "1.000000000000000e-04"),
            (1.0e15, "1.000000000000000e+15"),
        ],
    )
    def test_double(self, value, expected):
        assert format_number(value) == expected

    def test_single(self):
        assert format_number(np.float32(2.5)) == "2.500000"
        assert format_number(-1.0e20, Precision.Single) == "-1.000000e+20"

    def test_non_finite(self):
        assert format_number(float("inf")) == "inf"
        assert format_number(float("-inf")) == "-inf"
        assert format_number(float("nan")) == "nan"


def test_snake_case():
    assert snake_case("Electric Current") == "electric_current"

"""Number and label formatting shared by the quantity serializers."""

from enum import Enum
from typing import Optional

import numpy as np

from physq.utils.logging import Debug


class Precision(Enum):
    """Floating-point precision used when printing numbers. The value of each member is the number of
    decimals printed.

    * Single: 32-bit binary floating point, 6 decimal digits.
    * Double: 64-bit binary floating point, 15 decimal digits.
    * Triple: 80-bit extended floating point, 18 decimal digits.
    * Quadruple: 128-bit binary floating point, 33 decimal digits.
    """

    Single = 6
    Double = 15
    Triple = 18
    Quadruple = 33

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.name.lower() == value.strip().lower():
                    return member
        return None

    @property
    def decimals(self) -> int:
        return self.value

    @classmethod
    def for_dtype(cls, dtype) -> "Precision":
        """Returns the precision matching the decimal resolution of a numpy floating dtype.

        :param dtype: A numpy floating dtype, e.g. ``np.float32``.
        :type dtype: numpy dtype-like
        :return: The matching precision.
        :rtype: :class:`Precision`
        """
        digits = np.finfo(dtype).precision
        for member in cls:
            if digits <= member.value:
                return member
        return cls.Quadruple


# Fixed notation is used for magnitudes in this interval, scientific notation elsewhere.
FIXED_LOWER_BOUND = 1.0e-3
FIXED_UPPER_BOUND = 1.0e15


def format_number(value, precision: Optional[Precision] = None) -> str:
    """Prints a floating-point number with a fixed count of decimals.

    Zero and magnitudes in [1e-3, 1e15[ are printed in fixed notation, anything else in scientific
    notation with the same count of mantissa decimals. Non-finite values print as ``nan``, ``inf`` or
    ``-inf``.

    :param value: The number to print. Python numbers are promoted to ``np.float64``.
    :type value: float or numpy floating scalar
    :param precision: The precision to print with. Defaults to the precision of the value's dtype.
    :type precision: :class:`Precision`, optional
    :return: The printed number.
    :rtype: str
    """
    number = value if isinstance(value, np.floating) else np.float64(value)
    if precision is None:
        precision = Precision.for_dtype(number.dtype)
    if not np.isfinite(number):
        Debug("Printing non-finite number %s", number)
        return str(float(number))
    magnitude = abs(number)
    if number == 0 or FIXED_LOWER_BOUND <= magnitude < FIXED_UPPER_BOUND:
        return np.format_float_positional(
            number, precision=precision.decimals, unique=False, fractional=True, trim="k"
        )
    return np.format_float_scientific(number, precision=precision.decimals, unique=False, trim="k")


def snake_case(text: str) -> str:
    """Lowercases a label and joins its words with underscores."""
    return text.strip().lower().replace(" ", "_")

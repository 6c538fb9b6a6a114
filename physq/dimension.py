from enum import Enum
from functools import total_ordering
from typing import Iterator, Tuple

import numpy as np

from physq.utils.formatting import snake_case


class Dimension(Enum):
    """Enum for the seven SI base physical dimensions, in the order they are stored in :class:`Dimensions`"""

    Time = 0
    Length = 1
    Mass = 2
    ElectricCurrent = 3
    Temperature = 4
    SubstanceAmount = 5
    LuminousIntensity = 6

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def key(self) -> str:
        """Snake-case label, used as keyword and serialization key."""
        return snake_case(_LABELS[self])


_SYMBOLS = {
    Dimension.Time: "T",
    Dimension.Length: "L",
    Dimension.Mass: "M",
    Dimension.ElectricCurrent: "I",
    Dimension.Temperature: "Θ",
    Dimension.SubstanceAmount: "N",
    Dimension.LuminousIntensity: "J",
}

_LABELS = {
    Dimension.Time: "Time",
    Dimension.Length: "Length",
    Dimension.Mass: "Mass",
    Dimension.ElectricCurrent: "Electric Current",
    Dimension.Temperature: "Temperature",
    Dimension.SubstanceAmount: "Substance Amount",
    Dimension.LuminousIntensity: "Luminous Intensity",
}


@total_ordering
class Dimensions:
    """
    Set of exponents of the seven SI base dimensions identifying a physical dimension, e.g. speed is
    ``Dimensions(time=-1, length=1)``. Immutable. Two quantities are dimensionally compatible iff their
    dimensions are equal. Ordering is lexicographic over time, length, mass, electric current,
    temperature, substance amount and luminous intensity.
    """

    __slots__ = ("_exponents",)

    def __init__(
        self,
        time: int = 0,
        length: int = 0,
        mass: int = 0,
        electric_current: int = 0,
        temperature: int = 0,
        substance_amount: int = 0,
        luminous_intensity: int = 0,
    ) -> None:
        exponents = (time, length, mass, electric_current, temperature, substance_amount, luminous_intensity)
        for exponent in exponents:
            if isinstance(exponent, bool) or not isinstance(exponent, (int, np.integer)):
                raise TypeError(f"Dimension exponents must be integers, got {exponent!r}")
        self._exponents = self._freeze(np.array(exponents, dtype=np.int8))

    @staticmethod
    def _freeze(exponents: np.ndarray) -> np.ndarray:
        exponents.setflags(write=False)
        return exponents

    @classmethod
    def from_array(cls, exponents) -> "Dimensions":
        """Creates a dimension set from a sequence of seven exponents in :class:`Dimension` order."""
        array = np.asarray(exponents)
        if array.shape != (len(Dimension),):
            raise ValueError(f"Expected {len(Dimension)} exponents, got shape {array.shape}")
        return cls(*(int(exponent) for exponent in array))

    @property
    def exponents(self) -> np.ndarray:
        """Read-only array of the seven exponents."""
        return self._exponents

    def __getitem__(self, dimension: Dimension) -> int:
        return int(self._exponents[dimension.value])

    def __iter__(self) -> Iterator[Tuple[Dimension, int]]:
        for dimension in Dimension:
            yield dimension, int(self._exponents[dimension.value])

    @property
    def time(self) -> int:
        return self[Dimension.Time]

    @property
    def length(self) -> int:
        return self[Dimension.Length]

    @property
    def mass(self) -> int:
        return self[Dimension.Mass]

    @property
    def electric_current(self) -> int:
        return self[Dimension.ElectricCurrent]

    @property
    def temperature(self) -> int:
        return self[Dimension.Temperature]

    @property
    def substance_amount(self) -> int:
        return self[Dimension.SubstanceAmount]

    @property
    def luminous_intensity(self) -> int:
        return self[Dimension.LuminousIntensity]

    def is_dimensionless(self) -> bool:
        return not np.any(self._exponents)

    # --- Bookkeeping ---

    def __mul__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_array(self._exponents + other._exponents)

    def __truediv__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_array(self._exponents - other._exponents)

    def __pow__(self, power: int) -> "Dimensions":
        if isinstance(power, bool) or not isinstance(power, (int, np.integer)):
            return NotImplemented
        return Dimensions.from_array(self._exponents * power)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return np.array_equal(self._exponents, other._exponents)

    def __lt__(self, other: "Dimensions") -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return tuple(self._exponents) < tuple(other._exponents)

    def __hash__(self) -> int:
        return hash(self._exponents.tobytes())

    # --- Serialization ---

    def _nonzero(self) -> Iterator[Tuple[Dimension, int]]:
        return ((dimension, exponent) for dimension, exponent in self if exponent != 0)

    def print(self) -> str:
        """Prints the set using dimension symbols in base-dimension order, e.g. energy prints as
        ``"T^(-2)·L^2·M"``.
        """
        terms = []
        for dimension, exponent in self._nonzero():
            if exponent == 1:
                terms.append(dimension.symbol)
            elif exponent > 0:
                terms.append(f"{dimension.symbol}^{exponent}")
            else:
                terms.append(f"{dimension.symbol}^({exponent})")
        return "·".join(terms) if terms else "1"

    def json(self) -> str:
        return "{" + ",".join(f'"{dimension.key}":{exponent}' for dimension, exponent in self._nonzero()) + "}"

    def xml(self) -> str:
        return "".join(f"<{dimension.key}>{exponent}</{dimension.key}>" for dimension, exponent in self._nonzero())

    def yaml(self) -> str:
        return "{" + ",".join(f"{dimension.key}:{exponent}" for dimension, exponent in self._nonzero()) + "}"

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        arguments = ", ".join(f"{dimension.key}={exponent}" for dimension, exponent in self._nonzero())
        return f"Dimensions({arguments})"


Dimensionless = Dimensions()

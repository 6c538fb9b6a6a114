from enum import Enum
from itertools import product
from typing import Dict, Optional

from physq.utils.logging import Debug


class UnitSystem(Enum):
    """Enum for the systems of units. Every unit kind has exactly one unit consistent with each system.

    * MetreKilogramSecondKelvin: metre, kilogram, second, kelvin.
    * MillimetreGramSecondKelvin: millimetre, gram, second, kelvin.
    * FootPoundSecondRankine: foot, pound, second, degree Rankine.
    * InchPoundSecondRankine: inch, pound, second, degree Rankine.
    """

    MetreKilogramSecondKelvin = "m·kg·s·K"
    MillimetreGramSecondKelvin = "mm·g·s·K"
    FootPoundSecondRankine = "ft·lbf·s·°R"
    InchPoundSecondRankine = "in·lbf·s·°R"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.parse(value)
        return None

    @property
    def abbreviation(self) -> str:
        return self.value

    @classmethod
    def spellings(cls) -> Dict[str, "UnitSystem"]:
        return dict(_SPELLINGS)

    @classmethod
    def parse(cls, text: str) -> Optional["UnitSystem"]:
        """Looks up a unit system by any of its spellings, e.g. ``"m-kg-s"`` or ``"ft·lb·s·R"``.

        :return: The unit system, or None if the spelling is unknown.
        """
        system = _SPELLINGS.get(text.strip())
        if system is None:
            Debug("Unknown unit system spelling '%s'", text)
        return system

    def __str__(self) -> str:
        return self.value


def _spell(system: UnitSystem, *parts) -> Dict[str, UnitSystem]:
    """Enumerates separator variants of a system's parts. The last part may be omitted."""
    spellings = {}
    separators = ("·", "-", "*", " ", ", ")
    for words in product(*parts):
        for separator in separators:
            spellings[separator.join(words)] = system
            spellings[separator.join(words[:-1])] = system
    return spellings


_SPELLINGS: Dict[str, UnitSystem] = {}
_SPELLINGS.update(_spell(UnitSystem.MetreKilogramSecondKelvin, ("m",), ("kg",), ("s",), ("K",)))
_SPELLINGS.update(_spell(UnitSystem.MillimetreGramSecondKelvin, ("mm",), ("g",), ("s",), ("K",)))
_SPELLINGS.update(_spell(UnitSystem.FootPoundSecondRankine, ("ft",), ("lbf", "lb"), ("s",), ("°R", "R")))
_SPELLINGS.update(_spell(UnitSystem.InchPoundSecondRankine, ("in",), ("lbf", "lb"), ("s",), ("°R", "R")))

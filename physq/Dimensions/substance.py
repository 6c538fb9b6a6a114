from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions

AVOGADRO = 6.02214076e23


class SubstanceAmountUnit(Unit):
    """Units of amount of substance. The standard unit is the mole."""

    Mole = "mol"
    Kilomole = "kmol", 1.0e3
    Megamole = "Mmol", 1.0e6
    Gigamole = "Gmol", 1.0e9
    Particles = "particles", 1.0 / AVOGADRO


SubstanceAmountUnit.define(
    SubstanceAmountUnit.Mole,
    Dimensions(substance_amount=1),
    spellings={
        SubstanceAmountUnit.Mole: ("mole", "moles"),
        SubstanceAmountUnit.Kilomole: ("kilomole", "kilomoles"),
        SubstanceAmountUnit.Particles: ("particle", "molecules", "atoms"),
    },
)


class SubstanceAmount(DimensionalScalar, unit=SubstanceAmountUnit):
    """An amount of substance, e.g. ``SubstanceAmount(2.0, SubstanceAmountUnit.Mole)``."""

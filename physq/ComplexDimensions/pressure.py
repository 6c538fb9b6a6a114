from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.force import ForceUnit
from physq.Dimensions.spatial import AreaUnit


class PressureUnit(Unit):
    """Units of pressure. The standard unit is the pascal."""

    Pascal = "Pa"
    Kilopascal = "kPa", 1.0e3
    Megapascal = "MPa", 1.0e6
    Gigapascal = "GPa", 1.0e9
    Bar = "bar", 1.0e5
    Atmosphere = "atm", 101325.0
    PoundPerSquareFoot = derive("lbf/ft^2", {ForceUnit.PoundForce: 1, AreaUnit.SquareFoot: -1})
    PoundPerSquareInch = derive("lbf/in^2", {ForceUnit.PoundForce: 1, AreaUnit.SquareInch: -1})


PressureUnit.define(
    PressureUnit.Pascal,
    Dimensions(time=-2, length=-1, mass=1),
    spellings={
        PressureUnit.Pascal: ("pascal", "pascals", "N/m^2"),
        PressureUnit.Kilopascal: ("kilopascal", "kilopascals"),
        PressureUnit.Megapascal: ("megapascal", "megapascals", "N/mm^2"),
        PressureUnit.Atmosphere: ("atmosphere", "atmospheres"),
        PressureUnit.PoundPerSquareFoot: ("psf", "lb/ft^2"),
        PressureUnit.PoundPerSquareInch: ("psi", "lb/in^2"),
    },
    systems=(
        PressureUnit.Pascal,
        PressureUnit.Pascal,
        PressureUnit.PoundPerSquareFoot,
        PressureUnit.PoundPerSquareInch,
    ),
)


class StaticPressure(DimensionalScalar, unit=PressureUnit):
    """The static pressure of a fluid, e.g. ``StaticPressure(1.0, PressureUnit.Atmosphere)``."""


class DynamicPressure(DimensionalScalar, unit=PressureUnit):
    """The kinetic energy per unit volume of a flowing fluid, ``0.5·ρ·v^2``, e.g.
    ``DynamicPressure(MassDensity(1.225), Speed(50.0))``."""


class TotalPressure(DimensionalScalar, unit=PressureUnit):
    """The sum of the static and dynamic pressures of a fluid, also known as the stagnation pressure."""


class PressureDifference(DimensionalScalar, unit=PressureUnit):
    """A difference between two static pressures. Adding one to a static pressure yields a static pressure."""

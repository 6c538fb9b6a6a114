from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.spatial import AreaUnit
from physq.Dimensions.temporal import TimeUnit
from physq.ComplexDimensions.pressure import PressureUnit


class DynamicViscosityUnit(Unit):
    """Units of dynamic viscosity. The standard unit is the pascal-second."""

    PascalSecond = "Pa·s"
    KilopascalSecond = derive("kPa·s", {PressureUnit.Kilopascal: 1, TimeUnit.Second: 1})
    MegapascalSecond = derive("MPa·s", {PressureUnit.Megapascal: 1, TimeUnit.Second: 1})
    GigapascalSecond = derive("GPa·s", {PressureUnit.Gigapascal: 1, TimeUnit.Second: 1})
    PoundSecondPerSquareFoot = derive("lbf·s/ft^2", {PressureUnit.PoundPerSquareFoot: 1, TimeUnit.Second: 1})
    PoundSecondPerSquareInch = derive("lbf·s/in^2", {PressureUnit.PoundPerSquareInch: 1, TimeUnit.Second: 1})
    Poise = "P", 0.1
    Centipoise = "cP", 1.0e-3


DynamicViscosityUnit.define(
    DynamicViscosityUnit.PascalSecond,
    Dimensions(time=-1, length=-1, mass=1),
    spellings={
        DynamicViscosityUnit.PascalSecond: ("kg/m/s", "N·s/m^2"),
        DynamicViscosityUnit.PoundSecondPerSquareInch: ("psi·s", "reyn"),
        DynamicViscosityUnit.Poise: ("poise",),
        DynamicViscosityUnit.Centipoise: ("centipoise",),
    },
    systems=(
        DynamicViscosityUnit.PascalSecond,
        DynamicViscosityUnit.PascalSecond,
        DynamicViscosityUnit.PoundSecondPerSquareFoot,
        DynamicViscosityUnit.PoundSecondPerSquareInch,
    ),
)


class DiffusivityUnit(Unit):
    """Units of diffusivity, shared by kinematic viscosity and thermal diffusivity. The standard unit is the
    square metre per second."""

    SquareMetrePerSecond = "m^2/s"
    SquareMillimetrePerSecond = derive("mm^2/s", {AreaUnit.SquareMillimetre: 1, TimeUnit.Second: -1})
    SquareCentimetrePerSecond = derive("cm^2/s", {AreaUnit.SquareCentimetre: 1, TimeUnit.Second: -1})
    SquareFootPerSecond = derive("ft^2/s", {AreaUnit.SquareFoot: 1, TimeUnit.Second: -1})
    SquareInchPerSecond = derive("in^2/s", {AreaUnit.SquareInch: 1, TimeUnit.Second: -1})
    Stokes = "St", 1.0e-4
    Centistokes = "cSt", 1.0e-6


DiffusivityUnit.define(
    DiffusivityUnit.SquareMetrePerSecond,
    Dimensions(time=-1, length=2),
    spellings={
        DiffusivityUnit.Stokes: ("stokes",),
        DiffusivityUnit.Centistokes: ("centistokes",),
    },
    systems=(
        DiffusivityUnit.SquareMetrePerSecond,
        DiffusivityUnit.SquareMillimetrePerSecond,
        DiffusivityUnit.SquareFootPerSecond,
        DiffusivityUnit.SquareInchPerSecond,
    ),
)


class DynamicViscosity(DimensionalScalar, unit=DynamicViscosityUnit):
    """The resistance of a fluid to shear, e.g. ``DynamicViscosity(1.0, DynamicViscosityUnit.Centipoise)``."""


class KinematicViscosity(DimensionalScalar, unit=DiffusivityUnit):
    """The dynamic viscosity of a fluid divided by its mass density."""


class ThermalDiffusivity(DimensionalScalar, unit=DiffusivityUnit):
    """The rate at which heat spreads through a material."""

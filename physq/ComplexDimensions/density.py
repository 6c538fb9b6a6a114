from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.mass import MassUnit
from physq.Dimensions.spatial import VolumeUnit


class MassDensityUnit(Unit):
    """Units of mass density. The standard unit is the kilogram per cubic metre."""

    KilogramPerCubicMetre = "kg/m^3"
    GramPerCubicMillimetre = derive("g/mm^3", {MassUnit.Gram: 1, VolumeUnit.CubicMillimetre: -1})
    GramPerCubicCentimetre = derive("g/cm^3", {MassUnit.Gram: 1, VolumeUnit.CubicCentimetre: -1})
    SlugPerCubicFoot = derive("slug/ft^3", {MassUnit.Slug: 1, VolumeUnit.CubicFoot: -1})
    SlinchPerCubicInch = derive("slinch/in^3", {MassUnit.Slinch: 1, VolumeUnit.CubicInch: -1})
    PoundPerCubicFoot = derive("lbm/ft^3", {MassUnit.Pound: 1, VolumeUnit.CubicFoot: -1})
    PoundPerCubicInch = derive("lbm/in^3", {MassUnit.Pound: 1, VolumeUnit.CubicInch: -1})


MassDensityUnit.define(
    MassDensityUnit.KilogramPerCubicMetre,
    Dimensions(length=-3, mass=1),
    spellings={
        MassDensityUnit.GramPerCubicCentimetre: ("g/cc", "g/mL"),
        MassDensityUnit.PoundPerCubicFoot: ("lb/ft^3",),
        MassDensityUnit.PoundPerCubicInch: ("lb/in^3",),
    },
    systems=(
        MassDensityUnit.KilogramPerCubicMetre,
        MassDensityUnit.GramPerCubicMillimetre,
        MassDensityUnit.SlugPerCubicFoot,
        MassDensityUnit.SlinchPerCubicInch,
    ),
)


class MassDensity(DimensionalScalar, unit=MassDensityUnit):
    """A mass per unit volume, e.g. ``MassDensity(1000.0, MassDensityUnit.KilogramPerCubicMetre)``."""

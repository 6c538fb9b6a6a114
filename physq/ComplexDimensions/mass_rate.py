from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.mass import MassUnit
from physq.Dimensions.temporal import TimeUnit


class MassRateUnit(Unit):
    """Units of mass flow rate. The standard unit is the kilogram per second."""

    KilogramPerSecond = "kg/s"
    GramPerSecond = derive("g/s", {MassUnit.Gram: 1, TimeUnit.Second: -1})
    SlugPerSecond = derive("slug/s", {MassUnit.Slug: 1, TimeUnit.Second: -1})
    SlinchPerSecond = derive("slinch/s", {MassUnit.Slinch: 1, TimeUnit.Second: -1})
    PoundPerSecond = derive("lbm/s", {MassUnit.Pound: 1, TimeUnit.Second: -1})


MassRateUnit.define(
    MassRateUnit.KilogramPerSecond,
    Dimensions(time=-1, mass=1),
    spellings={MassRateUnit.PoundPerSecond: ("lb/s",)},
    systems=(
        MassRateUnit.KilogramPerSecond,
        MassRateUnit.GramPerSecond,
        MassRateUnit.SlugPerSecond,
        MassRateUnit.SlinchPerSecond,
    ),
)


class MassRate(DimensionalScalar, unit=MassRateUnit):
    """A mass flow rate. The time rate of a :class:`Mass`."""

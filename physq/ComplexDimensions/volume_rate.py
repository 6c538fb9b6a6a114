from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.spatial import VolumeUnit
from physq.Dimensions.temporal import TimeUnit


class VolumeRateUnit(Unit):
    """Units of volume flow rate. The standard unit is the cubic metre per second."""

    CubicMetrePerSecond = "m^3/s"
    CubicFootPerSecond = derive("ft^3/s", {VolumeUnit.CubicFoot: 1, TimeUnit.Second: -1})
    LitrePerSecond = derive("L/s", {VolumeUnit.Litre: 1, TimeUnit.Second: -1})
    CubicInchPerSecond = derive("in^3/s", {VolumeUnit.CubicInch: 1, TimeUnit.Second: -1})
    MillilitrePerSecond = derive("mL/s", {VolumeUnit.Millilitre: 1, TimeUnit.Second: -1})
    CubicMillimetrePerSecond = derive("mm^3/s", {VolumeUnit.CubicMillimetre: 1, TimeUnit.Second: -1})
    LitrePerMinute = derive("L/min", {VolumeUnit.Litre: 1, TimeUnit.Minute: -1})
    CubicMetrePerHour = derive("m^3/hr", {VolumeUnit.CubicMetre: 1, TimeUnit.Hour: -1})


VolumeRateUnit.define(
    VolumeRateUnit.CubicMetrePerSecond,
    Dimensions(time=-1, length=3),
    spellings={
        VolumeRateUnit.CubicFootPerSecond: ("cfs",),
        VolumeRateUnit.LitrePerMinute: ("lpm",),
    },
    systems=(
        VolumeRateUnit.CubicMetrePerSecond,
        VolumeRateUnit.CubicMillimetrePerSecond,
        VolumeRateUnit.CubicFootPerSecond,
        VolumeRateUnit.CubicInchPerSecond,
    ),
)


class VolumeRate(DimensionalScalar, unit=VolumeRateUnit):
    """A volume flow rate. The time rate of a :class:`Volume`."""

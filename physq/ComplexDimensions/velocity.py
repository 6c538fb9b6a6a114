from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.spatial import LengthUnit
from physq.Dimensions.temporal import TimeUnit


class SpeedUnit(Unit):
    """Units of speed. The standard unit is the metre per second."""

    MilePerSecond = derive("mi/s", {LengthUnit.Mile: 1, TimeUnit.Second: -1})
    KilometrePerSecond = derive("km/s", {LengthUnit.Kilometre: 1, TimeUnit.Second: -1})
    YardPerSecond = derive("yd/s", {LengthUnit.Yard: 1, TimeUnit.Second: -1})
    MetrePerSecond = "m/s"
    FootPerSecond = derive("ft/s", {LengthUnit.Foot: 1, TimeUnit.Second: -1})
    DecimetrePerSecond = derive("dm/s", {LengthUnit.Decimetre: 1, TimeUnit.Second: -1})
    InchPerSecond = derive("in/s", {LengthUnit.Inch: 1, TimeUnit.Second: -1})
    CentimetrePerSecond = derive("cm/s", {LengthUnit.Centimetre: 1, TimeUnit.Second: -1})
    MillimetrePerSecond = derive("mm/s", {LengthUnit.Millimetre: 1, TimeUnit.Second: -1})
    MilPerSecond = derive("mil/s", {LengthUnit.Mil: 1, TimeUnit.Second: -1})
    MicrometrePerSecond = derive("μm/s", {LengthUnit.Micrometre: 1, TimeUnit.Second: -1})
    MicroinchPerSecond = derive("μin/s", {LengthUnit.Microinch: 1, TimeUnit.Second: -1})
    KilometrePerHour = derive("km/hr", {LengthUnit.Kilometre: 1, TimeUnit.Hour: -1})
    MilePerHour = derive("mi/hr", {LengthUnit.Mile: 1, TimeUnit.Hour: -1})
    Knot = "kn", 1852.0 / 3600.0


SpeedUnit.define(
    SpeedUnit.MetrePerSecond,
    Dimensions(time=-1, length=1),
    spellings={
        SpeedUnit.MetrePerSecond: ("mps", "m/sec"),
        SpeedUnit.FootPerSecond: ("fps", "ft/sec"),
        SpeedUnit.KilometrePerHour: ("km/h", "kph", "kmph"),
        SpeedUnit.MilePerHour: ("mi/h", "mph"),
        SpeedUnit.Knot: ("kt", "kts", "knot", "knots"),
    },
    systems=(
        SpeedUnit.MetrePerSecond,
        SpeedUnit.MillimetrePerSecond,
        SpeedUnit.FootPerSecond,
        SpeedUnit.InchPerSecond,
    ),
)


class Speed(DimensionalScalar, unit=SpeedUnit):
    """
    A speed, e.g. ``Speed(60.0, SpeedUnit.MilePerHour)``. Can also be created from a length and a time,
    ``Speed(length, time)``, or from a length and a frequency, ``Speed(length, frequency)``.
    """


class SoundSpeed(DimensionalScalar, unit=SpeedUnit):
    """The speed at which sound propagates through a medium."""

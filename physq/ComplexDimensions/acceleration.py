from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.spatial import LengthUnit
from physq.Dimensions.temporal import TimeUnit


class AccelerationUnit(Unit):
    """Units of acceleration. The standard unit is the metre per square second."""

    MilePerSquareSecond = derive("mi/s^2", {LengthUnit.Mile: 1, TimeUnit.Second: -2})
    KilometrePerSquareSecond = derive("km/s^2", {LengthUnit.Kilometre: 1, TimeUnit.Second: -2})
    YardPerSquareSecond = derive("yd/s^2", {LengthUnit.Yard: 1, TimeUnit.Second: -2})
    MetrePerSquareSecond = "m/s^2"
    FootPerSquareSecond = derive("ft/s^2", {LengthUnit.Foot: 1, TimeUnit.Second: -2})
    DecimetrePerSquareSecond = derive("dm/s^2", {LengthUnit.Decimetre: 1, TimeUnit.Second: -2})
    InchPerSquareSecond = derive("in/s^2", {LengthUnit.Inch: 1, TimeUnit.Second: -2})
    CentimetrePerSquareSecond = derive("cm/s^2", {LengthUnit.Centimetre: 1, TimeUnit.Second: -2})
    MillimetrePerSquareSecond = derive("mm/s^2", {LengthUnit.Millimetre: 1, TimeUnit.Second: -2})
    MilPerSquareSecond = derive("mil/s^2", {LengthUnit.Mil: 1, TimeUnit.Second: -2})
    MicrometrePerSquareSecond = derive("μm/s^2", {LengthUnit.Micrometre: 1, TimeUnit.Second: -2})
    MicroinchPerSquareSecond = derive("μin/s^2", {LengthUnit.Microinch: 1, TimeUnit.Second: -2})


AccelerationUnit.define(
    AccelerationUnit.MetrePerSquareSecond,
    Dimensions(time=-2, length=1),
    spellings={
        AccelerationUnit.MetrePerSquareSecond: ("m/s/s", "m·s^-2"),
        AccelerationUnit.FootPerSquareSecond: ("ft/s/s", "ft·s^-2"),
        AccelerationUnit.InchPerSquareSecond: ("in/s/s", "in·s^-2"),
    },
    systems=(
        AccelerationUnit.MetrePerSquareSecond,
        AccelerationUnit.MillimetrePerSquareSecond,
        AccelerationUnit.FootPerSquareSecond,
        AccelerationUnit.InchPerSquareSecond,
    ),
)


class Acceleration(DimensionalScalar, unit=AccelerationUnit):
    """An acceleration. The time rate of a :class:`Speed`."""

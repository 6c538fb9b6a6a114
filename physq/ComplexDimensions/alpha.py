from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.angular import AngleUnit
from physq.Dimensions.temporal import TimeUnit


class AngularAccelerationUnit(Unit):
    """Units of angular acceleration. The standard unit is the radian per square second."""

    RadianPerSquareSecond = "rad/s^2"
    DegreePerSquareSecond = derive("deg/s^2", {AngleUnit.Degree: 1, TimeUnit.Second: -2})
    RevolutionPerSquareSecond = derive("rev/s^2", {AngleUnit.Revolution: 1, TimeUnit.Second: -2})
    RadianPerSquareMinute = derive("rad/min^2", {AngleUnit.Radian: 1, TimeUnit.Minute: -2})
    DegreePerSquareMinute = derive("deg/min^2", {AngleUnit.Degree: 1, TimeUnit.Minute: -2})
    RevolutionPerSquareMinute = derive("rev/min^2", {AngleUnit.Revolution: 1, TimeUnit.Minute: -2})
    RadianPerSquareHour = derive("rad/hr^2", {AngleUnit.Radian: 1, TimeUnit.Hour: -2})
    DegreePerSquareHour = derive("deg/hr^2", {AngleUnit.Degree: 1, TimeUnit.Hour: -2})
    RevolutionPerSquareHour = derive("rev/hr^2", {AngleUnit.Revolution: 1, TimeUnit.Hour: -2})


AngularAccelerationUnit.define(
    AngularAccelerationUnit.RadianPerSquareSecond,
    Dimensions(time=-2),
    spellings={AngularAccelerationUnit.RadianPerSquareSecond: ("rad/s/s",)},
)


class AngularAcceleration(DimensionalScalar, unit=AngularAccelerationUnit):
    """An angular acceleration. The time rate of an :class:`AngularSpeed`."""

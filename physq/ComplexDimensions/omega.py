from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.angular import AngleUnit
from physq.Dimensions.temporal import TimeUnit


class AngularSpeedUnit(Unit):
    """Units of angular speed. The standard unit is the radian per second."""

    RadianPerSecond = "rad/s"
    DegreePerSecond = derive("deg/s", {AngleUnit.Degree: 1, TimeUnit.Second: -1})
    RevolutionPerSecond = derive("rev/s", {AngleUnit.Revolution: 1, TimeUnit.Second: -1})
    RadianPerMinute = derive("rad/min", {AngleUnit.Radian: 1, TimeUnit.Minute: -1})
    DegreePerMinute = derive("deg/min", {AngleUnit.Degree: 1, TimeUnit.Minute: -1})
    RevolutionPerMinute = derive("rev/min", {AngleUnit.Revolution: 1, TimeUnit.Minute: -1})
    RadianPerHour = derive("rad/hr", {AngleUnit.Radian: 1, TimeUnit.Hour: -1})
    DegreePerHour = derive("deg/hr", {AngleUnit.Degree: 1, TimeUnit.Hour: -1})
    RevolutionPerHour = derive("rev/hr", {AngleUnit.Revolution: 1, TimeUnit.Hour: -1})


AngularSpeedUnit.define(
    AngularSpeedUnit.RadianPerSecond,
    Dimensions(time=-1),
    spellings={
        AngularSpeedUnit.RadianPerSecond: ("rad/sec",),
        AngularSpeedUnit.RevolutionPerSecond: ("rps",),
        AngularSpeedUnit.RevolutionPerMinute: ("rpm", "RPM"),
    },
)


class AngularSpeed(DimensionalScalar, unit=AngularSpeedUnit):
    """An angular speed, e.g. ``AngularSpeed(3000.0, AngularSpeedUnit.RevolutionPerMinute)``. The time rate
    of an :class:`Angle`."""

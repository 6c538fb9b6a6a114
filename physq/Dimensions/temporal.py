from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions


class TimeUnit(Unit):
    """Units of time. The standard unit is the second."""

    Nanosecond = "ns", 1.0e-9
    Microsecond = "μs", 1.0e-6
    Millisecond = "ms", 1.0e-3
    Second = "s"
    Minute = "min", 60.0
    Hour = "hr", 3600.0


TimeUnit.define(
    TimeUnit.Second,
    Dimensions(time=1),
    spellings={
        TimeUnit.Nanosecond: ("nsec", "nanosecond", "nanoseconds"),
        TimeUnit.Microsecond: ("μsec", "microsecond", "microseconds"),
        TimeUnit.Millisecond: ("msec", "millisecond", "milliseconds"),
        TimeUnit.Second: ("sec", "secs", "second", "seconds"),
        TimeUnit.Minute: ("mins", "minute", "minutes"),
        TimeUnit.Hour: ("h", "hrs", "hour", "hours"),
    },
)


class FrequencyUnit(Unit):
    """Units of frequency. The standard unit is the hertz."""

    Hertz = "Hz"
    Kilohertz = "kHz", 1.0e3
    Megahertz = "MHz", 1.0e6
    Gigahertz = "GHz", 1.0e9
    PerMinute = "/min", 1.0 / 60.0
    PerHour = "/hr", 1.0 / 3600.0


FrequencyUnit.define(
    FrequencyUnit.Hertz,
    Dimensions(time=-1),
    spellings={
        FrequencyUnit.Hertz: ("1/s", "/s", "s^-1", "hertz"),
        FrequencyUnit.Kilohertz: ("kilohertz",),
        FrequencyUnit.Megahertz: ("megahertz",),
        FrequencyUnit.Gigahertz: ("gigahertz",),
        FrequencyUnit.PerMinute: ("1/min", "min^-1"),
        FrequencyUnit.PerHour: ("1/hr", "/h", "1/h", "hr^-1"),
    },
)


class Time(DimensionalScalar, unit=TimeUnit):
    """A duration of time, e.g. ``Time(1.5, TimeUnit.Minute)``. Can also be created as the reciprocal of a
    :class:`Frequency`, or from two quantities related to time, e.g. ``Time(length, speed)``."""

    def frequency(self) -> "Frequency":
        """Returns the frequency whose period is this time."""
        return Frequency(self)


class Frequency(DimensionalScalar, unit=FrequencyUnit):
    """A frequency, e.g. ``Frequency(50.0, FrequencyUnit.Hertz)``."""

    def period(self) -> Time:
        """Returns the time of one cycle at this frequency."""
        return Time(self)


class StrainRate(DimensionalScalar, unit=FrequencyUnit):
    """The time rate of change of a :class:`ScalarStrain`."""

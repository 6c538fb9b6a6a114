import math

from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions


class AngleUnit(Unit):
    """Units of plane angle. The standard unit is the radian."""

    Radian = "rad"
    Degree = "deg", math.pi / 180.0
    Arcminute = "arcmin", math.pi / 10800.0
    Arcsecond = "arcsec", math.pi / 648000.0
    Revolution = "rev", 2.0 * math.pi


AngleUnit.define(
    AngleUnit.Radian,
    Dimensions(),
    spellings={
        AngleUnit.Radian: ("radian", "radians"),
        AngleUnit.Degree: ("°", "degree", "degrees"),
        AngleUnit.Arcminute: ("arcminute", "arcminutes"),
        AngleUnit.Arcsecond: ("arcsecond", "arcseconds"),
        AngleUnit.Revolution: ("revolution", "revolutions", "rot", "cycle"),
    },
)


class SolidAngleUnit(Unit):
    """Units of solid angle. The standard unit is the steradian."""

    Steradian = "sr"
    SquareDegree = derive("deg^2", {AngleUnit.Degree: 2})
    SquareArcminute = derive("arcmin^2", {AngleUnit.Arcminute: 2})
    SquareArcsecond = derive("arcsec^2", {AngleUnit.Arcsecond: 2})


SolidAngleUnit.define(
    SolidAngleUnit.Steradian,
    Dimensions(),
    spellings={
        SolidAngleUnit.Steradian: ("steradian", "steradians"),
        SolidAngleUnit.SquareDegree: ("°^2", "square degree", "square degrees"),
    },
)


class Angle(DimensionalScalar, unit=AngleUnit):
    """A plane angle, e.g. ``Angle(90.0, AngleUnit.Degree)``. Dimensionless, but expressed in units."""


class SolidAngle(DimensionalScalar, unit=SolidAngleUnit):
    """A solid angle."""

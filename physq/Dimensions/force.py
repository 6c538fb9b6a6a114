from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions
from physq.Dimensions.mass import POUND_MASS, STANDARD_GRAVITY


class ForceUnit(Unit):
    """Units of force. The standard unit is the newton."""

    Newton = "N"
    Kilonewton = "kN", 1.0e3
    Meganewton = "MN", 1.0e6
    Giganewton = "GN", 1.0e9
    Millinewton = "mN", 1.0e-3
    Micronewton = "μN", 1.0e-6
    Nanonewton = "nN", 1.0e-9
    PoundForce = "lbf", POUND_MASS * STANDARD_GRAVITY
    Dyne = "dyn", 1.0e-5


ForceUnit.define(
    ForceUnit.Newton,
    Dimensions(time=-2, length=1, mass=1),
    spellings={
        ForceUnit.Newton: ("newton", "newtons", "kg·m/s^2"),
        ForceUnit.Kilonewton: ("kilonewton", "kilonewtons"),
        ForceUnit.PoundForce: ("lb", "lbs", "pound", "pounds"),
        ForceUnit.Dyne: ("dyne", "dynes"),
    },
    systems=(ForceUnit.Newton, ForceUnit.Micronewton, ForceUnit.PoundForce, ForceUnit.PoundForce),
)


class Force(DimensionalScalar, unit=ForceUnit):
    """A force, e.g. ``Force(10.0, ForceUnit.PoundForce)``. The product of a mass and an acceleration."""

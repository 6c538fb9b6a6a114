from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions

POUND_MASS = 0.45359237
STANDARD_GRAVITY = 9.80665

# A slug is accelerated at 1 ft/s^2 by one pound-force, a slinch at 1 in/s^2.
SLUG = POUND_MASS * STANDARD_GRAVITY / 0.3048
SLINCH = SLUG * 12.0


class MassUnit(Unit):
    """Units of mass. The standard unit is the kilogram."""

    Kilogram = "kg"
    Gram = "g", 1.0e-3
    Slug = "slug", SLUG
    Slinch = "slinch", SLINCH
    Pound = "lbm", POUND_MASS


MassUnit.define(
    MassUnit.Kilogram,
    Dimensions(mass=1),
    spellings={
        MassUnit.Kilogram: ("kilogram", "kilograms"),
        MassUnit.Gram: ("gram", "grams"),
        MassUnit.Slug: ("slugs",),
        MassUnit.Slinch: ("slinches", "lbf·s^2/in"),
        MassUnit.Pound: ("lb", "lbs", "pound", "pounds"),
    },
    systems=(MassUnit.Kilogram, MassUnit.Gram, MassUnit.Slug, MassUnit.Slinch),
)


class Mass(DimensionalScalar, unit=MassUnit):
    """A mass, e.g. ``Mass(2.0, MassUnit.Pound)``."""

from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.energy import EnergyUnit
from physq.Dimensions.temporal import TimeUnit


class PowerUnit(Unit):
    """Units of power. The standard unit is the watt."""

    Watt = "W"
    Milliwatt = "mW", 1.0e-3
    Microwatt = "μW", 1.0e-6
    Nanowatt = "nW", 1.0e-9
    Kilowatt = "kW", 1.0e3
    Megawatt = "MW", 1.0e6
    Gigawatt = "GW", 1.0e9
    FootPoundPerSecond = derive("ft·lbf/s", {EnergyUnit.FootPound: 1, TimeUnit.Second: -1})
    InchPoundPerSecond = derive("in·lbf/s", {EnergyUnit.InchPound: 1, TimeUnit.Second: -1})


PowerUnit.define(
    PowerUnit.Watt,
    Dimensions(time=-3, length=2, mass=1),
    spellings={
        PowerUnit.Watt: ("watt", "watts", "J/s"),
        PowerUnit.Kilowatt: ("kilowatt", "kilowatts"),
        PowerUnit.Megawatt: ("megawatt", "megawatts"),
        PowerUnit.FootPoundPerSecond: ("ft·lb/s",),
        PowerUnit.InchPoundPerSecond: ("in·lb/s",),
    },
    systems=(PowerUnit.Watt, PowerUnit.Nanowatt, PowerUnit.FootPoundPerSecond, PowerUnit.InchPoundPerSecond),
)


class Power(DimensionalScalar, unit=PowerUnit):
    """A power, e.g. ``Power(1.5, PowerUnit.Kilowatt)``. The time rate of :class:`Energy`."""

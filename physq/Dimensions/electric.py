from physq.core import DimensionalScalar, Unit
from physq.dimension import Dimensions

ELEMENTARY_CHARGE = 1.602176634e-19


class ElectricCurrentUnit(Unit):
    """Units of electric current. The standard unit is the ampere."""

    Ampere = "A"
    Kiloampere = "kA", 1.0e3
    Megaampere = "MA", 1.0e6
    Gigaampere = "GA", 1.0e9
    Teraampere = "TA", 1.0e12
    Milliampere = "mA", 1.0e-3
    Microampere = "μA", 1.0e-6
    Nanoampere = "nA", 1.0e-9
    ElementaryChargePerSecond = "e/s", ELEMENTARY_CHARGE
    ElementaryChargePerMinute = "e/min", ELEMENTARY_CHARGE / 60.0
    ElementaryChargePerHour = "e/hr", ELEMENTARY_CHARGE / 3600.0


ElectricCurrentUnit.define(
    ElectricCurrentUnit.Ampere,
    Dimensions(electric_current=1),
    spellings={
        ElectricCurrentUnit.Ampere: ("amp", "amps", "ampere", "amperes", "C/s"),
        ElectricCurrentUnit.Milliampere: ("milliamp", "milliamps"),
    },
)


class ElectricChargeUnit(Unit):
    """Units of electric charge. The standard unit is the coulomb."""

    Coulomb = "C"
    Kilocoulomb = "kC", 1.0e3
    Megacoulomb = "MC", 1.0e6
    Gigacoulomb = "GC", 1.0e9
    Teracoulomb = "TC", 1.0e12
    Millicoulomb = "mC", 1.0e-3
    Microcoulomb = "μC", 1.0e-6
    Nanocoulomb = "nC", 1.0e-9
    ElementaryCharge = "e", ELEMENTARY_CHARGE
    AmpereMinute = "A·min", 60.0
    AmpereHour = "A·hr", 3600.0
    MilliampereHour = "mA·hr", 3.6
    KiloampereHour = "kA·hr", 3.6e6


ElectricChargeUnit.define(
    ElectricChargeUnit.Coulomb,
    Dimensions(time=1, electric_current=1),
    spellings={
        ElectricChargeUnit.Coulomb: ("coulomb", "coulombs", "A·s"),
        ElectricChargeUnit.AmpereHour: ("Ah", "A·h"),
        ElectricChargeUnit.MilliampereHour: ("mAh", "mA·h"),
        ElectricChargeUnit.KiloampereHour: ("kAh", "kA·h"),
    },
)


class ElectricCurrent(DimensionalScalar, unit=ElectricCurrentUnit):
    """An electric current. The time rate of an :class:`ElectricCharge`."""


class ElectricCharge(DimensionalScalar, unit=ElectricChargeUnit):
    """An electric charge."""

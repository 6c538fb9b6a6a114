from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.electric import ELEMENTARY_CHARGE
from physq.Dimensions.force import ForceUnit
from physq.Dimensions.spatial import LengthUnit

CALORIE = 4.184


class EnergyUnit(Unit):
    """Units of energy. The standard unit is the joule."""

    Joule = "J"
    Millijoule = "mJ", 1.0e-3
    Microjoule = "μJ", 1.0e-6
    Nanojoule = "nJ", 1.0e-9
    Kilojoule = "kJ", 1.0e3
    Megajoule = "MJ", 1.0e6
    Gigajoule = "GJ", 1.0e9
    FootPound = derive("ft·lbf", {LengthUnit.Foot: 1, ForceUnit.PoundForce: 1})
    InchPound = derive("in·lbf", {LengthUnit.Inch: 1, ForceUnit.PoundForce: 1})
    Calorie = "cal", CALORIE
    Kilocalorie = "kcal", CALORIE * 1.0e3
    WattHour = "W·hr", 3600.0
    KilowattHour = "kW·hr", 3.6e6
    ElectronVolt = "eV", ELEMENTARY_CHARGE


EnergyUnit.define(
    EnergyUnit.Joule,
    Dimensions(time=-2, length=2, mass=1),
    spellings={
        EnergyUnit.Joule: ("joule", "joules", "N·m"),
        EnergyUnit.Kilojoule: ("kilojoule", "kilojoules"),
        EnergyUnit.FootPound: ("ft·lb", "lbf·ft", "foot-pound"),
        EnergyUnit.InchPound: ("in·lb", "lbf·in", "inch-pound"),
        EnergyUnit.Calorie: ("calorie", "calories"),
        EnergyUnit.Kilocalorie: ("Cal", "kilocalorie", "kilocalories"),
        EnergyUnit.WattHour: ("Wh", "W·h"),
        EnergyUnit.KilowattHour: ("kWh", "kW·h"),
    },
    systems=(EnergyUnit.Joule, EnergyUnit.Nanojoule, EnergyUnit.FootPound, EnergyUnit.InchPound),
)


class Energy(DimensionalScalar, unit=EnergyUnit):
    """An amount of energy or work, e.g. ``Energy(1.0, EnergyUnit.KilowattHour)``."""

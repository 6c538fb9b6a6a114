from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.energy import EnergyUnit
from physq.Dimensions.spatial import LengthUnit


def _per(energy: EnergyUnit, length: LengthUnit):
    return derive(f"{energy.abbreviation}/{length.abbreviation}", {energy: 1, length: -1})


class TransportEnergyConsumptionUnit(Unit):
    """Units of energy consumed per distance travelled. The standard unit is the joule per metre."""

    JoulePerMile = _per(EnergyUnit.Joule, LengthUnit.Mile)
    JoulePerKilometre = _per(EnergyUnit.Joule, LengthUnit.Kilometre)
    JoulePerMetre = "J/m"
    NanojoulePerMillimetre = _per(EnergyUnit.Nanojoule, LengthUnit.Millimetre)
    KilojoulePerMile = _per(EnergyUnit.Kilojoule, LengthUnit.Mile)
    KilojoulePerKilometre = _per(EnergyUnit.Kilojoule, LengthUnit.Kilometre)
    KilojoulePerMetre = _per(EnergyUnit.Kilojoule, LengthUnit.Metre)
    MegajoulePerMile = _per(EnergyUnit.Megajoule, LengthUnit.Mile)
    MegajoulePerKilometre = _per(EnergyUnit.Megajoule, LengthUnit.Kilometre)
    KilowattHourPerMile = _per(EnergyUnit.KilowattHour, LengthUnit.Mile)
    KilowattHourPerKilometre = _per(EnergyUnit.KilowattHour, LengthUnit.Kilometre)
    FootPoundPerFoot = _per(EnergyUnit.FootPound, LengthUnit.Foot)
    InchPoundPerInch = _per(EnergyUnit.InchPound, LengthUnit.Inch)


TransportEnergyConsumptionUnit.define(
    TransportEnergyConsumptionUnit.JoulePerMetre,
    Dimensions(time=-2, length=1, mass=1),
    spellings={
        TransportEnergyConsumptionUnit.KilowattHourPerMile: ("kWh/mi",),
        TransportEnergyConsumptionUnit.KilowattHourPerKilometre: ("kWh/km",),
    },
    systems=(
        TransportEnergyConsumptionUnit.JoulePerMetre,
        TransportEnergyConsumptionUnit.NanojoulePerMillimetre,
        TransportEnergyConsumptionUnit.FootPoundPerFoot,
        TransportEnergyConsumptionUnit.InchPoundPerInch,
    ),
)


class TransportEnergyConsumption(DimensionalScalar, unit=TransportEnergyConsumptionUnit):
    """The energy a vehicle consumes per distance travelled, e.g.
    ``TransportEnergyConsumption(0.2, TransportEnergyConsumptionUnit.KilowattHourPerKilometre)``."""

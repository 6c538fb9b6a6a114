from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.energy import EnergyUnit
from physq.Dimensions.mass import MassUnit
from physq.ComplexDimensions.power import PowerUnit


class SpecificEnergyUnit(Unit):
    """Units of energy per unit mass. The standard unit is the joule per kilogram."""

    JoulePerKilogram = "J/kg"
    NanojoulePerGram = derive("nJ/g", {EnergyUnit.Nanojoule: 1, MassUnit.Gram: -1})
    FootPoundPerSlug = derive("ft·lbf/slug", {EnergyUnit.FootPound: 1, MassUnit.Slug: -1})
    InchPoundPerSlinch = derive("in·lbf/slinch", {EnergyUnit.InchPound: 1, MassUnit.Slinch: -1})
    KilojoulePerKilogram = derive("kJ/kg", {EnergyUnit.Kilojoule: 1, MassUnit.Kilogram: -1})


SpecificEnergyUnit.define(
    SpecificEnergyUnit.JoulePerKilogram,
    Dimensions(time=-2, length=2),
    spellings={SpecificEnergyUnit.JoulePerKilogram: ("m^2/s^2",)},
    systems=(
        SpecificEnergyUnit.JoulePerKilogram,
        SpecificEnergyUnit.NanojoulePerGram,
        SpecificEnergyUnit.FootPoundPerSlug,
        SpecificEnergyUnit.InchPoundPerSlinch,
    ),
)


class SpecificPowerUnit(Unit):
    """Units of power per unit mass. The standard unit is the watt per kilogram."""

    WattPerKilogram = "W/kg"
    NanowattPerGram = derive("nW/g", {PowerUnit.Nanowatt: 1, MassUnit.Gram: -1})
    FootPoundPerSlugPerSecond = derive("ft·lbf/slug/s", {PowerUnit.FootPoundPerSecond: 1, MassUnit.Slug: -1})
    InchPoundPerSlinchPerSecond = derive(
        "in·lbf/slinch/s", {PowerUnit.InchPoundPerSecond: 1, MassUnit.Slinch: -1}
    )
    KilowattPerKilogram = derive("kW/kg", {PowerUnit.Kilowatt: 1, MassUnit.Kilogram: -1})


SpecificPowerUnit.define(
    SpecificPowerUnit.WattPerKilogram,
    Dimensions(time=-3, length=2),
    spellings={SpecificPowerUnit.WattPerKilogram: ("J/kg/s", "m^2/s^3")},
    systems=(
        SpecificPowerUnit.WattPerKilogram,
        SpecificPowerUnit.NanowattPerGram,
        SpecificPowerUnit.FootPoundPerSlugPerSecond,
        SpecificPowerUnit.InchPoundPerSlinchPerSecond,
    ),
)


class SpecificEnergy(DimensionalScalar, unit=SpecificEnergyUnit):
    """An energy per unit mass."""


class SpecificPower(DimensionalScalar, unit=SpecificPowerUnit):
    """A power per unit mass. The time rate of a :class:`SpecificEnergy`."""

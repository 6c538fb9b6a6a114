from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.energy import EnergyUnit
from physq.Dimensions.mass import MassUnit
from physq.Dimensions.thermal import TemperatureDifferenceUnit
from physq.ComplexDimensions.specific import SpecificEnergyUnit


class HeatCapacityUnit(Unit):
    """Units of heat capacity. The standard unit is the joule per kelvin."""

    JoulePerKelvin = "J/K"
    NanojoulePerKelvin = derive("nJ/K", {EnergyUnit.Nanojoule: 1, TemperatureDifferenceUnit.Kelvin: -1})
    FootPoundPerRankine = derive("ft·lbf/°R", {EnergyUnit.FootPound: 1, TemperatureDifferenceUnit.Rankine: -1})
    InchPoundPerRankine = derive("in·lbf/°R", {EnergyUnit.InchPound: 1, TemperatureDifferenceUnit.Rankine: -1})
    KilojoulePerKelvin = derive("kJ/K", {EnergyUnit.Kilojoule: 1, TemperatureDifferenceUnit.Kelvin: -1})


HeatCapacityUnit.define(
    HeatCapacityUnit.JoulePerKelvin,
    Dimensions(time=-2, length=2, mass=1, temperature=-1),
    spellings={
        HeatCapacityUnit.JoulePerKelvin: ("J/°C",),
        HeatCapacityUnit.FootPoundPerRankine: ("ft·lbf/R", "ft·lb/°R"),
        HeatCapacityUnit.InchPoundPerRankine: ("in·lbf/R", "in·lb/°R"),
    },
    systems=(
        HeatCapacityUnit.JoulePerKelvin,
        HeatCapacityUnit.NanojoulePerKelvin,
        HeatCapacityUnit.FootPoundPerRankine,
        HeatCapacityUnit.InchPoundPerRankine,
    ),
)


class SpecificHeatCapacityUnit(Unit):
    """Units of heat capacity per unit mass. The standard unit is the joule per kilogram per kelvin."""

    JoulePerKilogramPerKelvin = "J/kg/K"
    NanojoulePerGramPerKelvin = derive(
        "nJ/g/K", {SpecificEnergyUnit.NanojoulePerGram: 1, TemperatureDifferenceUnit.Kelvin: -1}
    )
    FootPoundPerSlugPerRankine = derive(
        "ft·lbf/slug/°R", {SpecificEnergyUnit.FootPoundPerSlug: 1, TemperatureDifferenceUnit.Rankine: -1}
    )
    InchPoundPerSlinchPerRankine = derive(
        "in·lbf/slinch/°R", {SpecificEnergyUnit.InchPoundPerSlinch: 1, TemperatureDifferenceUnit.Rankine: -1}
    )
    KilojoulePerKilogramPerKelvin = derive(
        "kJ/kg/K", {EnergyUnit.Kilojoule: 1, MassUnit.Kilogram: -1, TemperatureDifferenceUnit.Kelvin: -1}
    )


SpecificHeatCapacityUnit.define(
    SpecificHeatCapacityUnit.JoulePerKilogramPerKelvin,
    Dimensions(time=-2, length=2, temperature=-1),
    spellings={
        SpecificHeatCapacityUnit.JoulePerKilogramPerKelvin: ("J/(kg·K)", "J/kg/°C", "m^2/s^2/K"),
        SpecificHeatCapacityUnit.KilojoulePerKilogramPerKelvin: ("kJ/(kg·K)",),
    },
    systems=(
        SpecificHeatCapacityUnit.JoulePerKilogramPerKelvin,
        SpecificHeatCapacityUnit.NanojoulePerGramPerKelvin,
        SpecificHeatCapacityUnit.FootPoundPerSlugPerRankine,
        SpecificHeatCapacityUnit.InchPoundPerSlinchPerRankine,
    ),
)


class IsobaricHeatCapacity(DimensionalScalar, unit=HeatCapacityUnit):
    """The heat capacity of a body at constant pressure."""


class IsochoricHeatCapacity(DimensionalScalar, unit=HeatCapacityUnit):
    """The heat capacity of a body at constant volume."""


class GasConstant(DimensionalScalar, unit=HeatCapacityUnit):
    """The gas constant of a body of gas, the difference between its isobaric and isochoric heat capacities."""


class SpecificIsobaricHeatCapacity(DimensionalScalar, unit=SpecificHeatCapacityUnit):
    """The heat capacity per unit mass of a material at constant pressure."""


class SpecificIsochoricHeatCapacity(DimensionalScalar, unit=SpecificHeatCapacityUnit):
    """The heat capacity per unit mass of a material at constant volume."""


class SpecificGasConstant(DimensionalScalar, unit=SpecificHeatCapacityUnit):
    """The gas constant per unit mass of a gas, e.g. about 287 J/kg/K for dry air."""

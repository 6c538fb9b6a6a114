from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.force import ForceUnit
from physq.Dimensions.spatial import AreaUnit, LengthUnit
from physq.Dimensions.temporal import TimeUnit
from physq.Dimensions.thermal import TemperatureDifferenceUnit
from physq.ComplexDimensions.power import PowerUnit


class ThermalConductivityUnit(Unit):
    """Units of thermal conductivity. The standard unit is the watt per metre per kelvin.

    In both foot-pound and inch-pound systems the consistent unit reduces to pound-force per second per
    degree Rankine."""

    WattPerMetrePerKelvin = "W/m/K"
    NanowattPerMillimetrePerKelvin = derive(
        "nW/mm/K",
        {PowerUnit.Nanowatt: 1, LengthUnit.Millimetre: -1, TemperatureDifferenceUnit.Kelvin: -1},
    )
    PoundPerSecondPerRankine = derive(
        "lbf/s/°R",
        {ForceUnit.PoundForce: 1, TimeUnit.Second: -1, TemperatureDifferenceUnit.Rankine: -1},
    )


ThermalConductivityUnit.define(
    ThermalConductivityUnit.WattPerMetrePerKelvin,
    Dimensions(time=-3, length=1, mass=1, temperature=-1),
    spellings={
        ThermalConductivityUnit.WattPerMetrePerKelvin: ("W/(m·K)", "W/m/°C"),
        ThermalConductivityUnit.PoundPerSecondPerRankine: ("lbf/s/R",),
    },
    systems=(
        ThermalConductivityUnit.WattPerMetrePerKelvin,
        ThermalConductivityUnit.NanowattPerMillimetrePerKelvin,
        ThermalConductivityUnit.PoundPerSecondPerRankine,
        ThermalConductivityUnit.PoundPerSecondPerRankine,
    ),
)


class EnergyFluxUnit(Unit):
    """Units of energy flux. The standard unit is the watt per square metre."""

    WattPerSquareMetre = "W/m^2"
    NanowattPerSquareMillimetre = derive("nW/mm^2", {PowerUnit.Nanowatt: 1, AreaUnit.SquareMillimetre: -1})
    FootPoundPerSquareFootPerSecond = derive(
        "ft·lbf/ft^2/s", {PowerUnit.FootPoundPerSecond: 1, AreaUnit.SquareFoot: -1}
    )
    InchPoundPerSquareInchPerSecond = derive(
        "in·lbf/in^2/s", {PowerUnit.InchPoundPerSecond: 1, AreaUnit.SquareInch: -1}
    )


EnergyFluxUnit.define(
    EnergyFluxUnit.WattPerSquareMetre,
    Dimensions(time=-3, mass=1),
    spellings={EnergyFluxUnit.WattPerSquareMetre: ("J/s/m^2",)},
    systems=(
        EnergyFluxUnit.WattPerSquareMetre,
        EnergyFluxUnit.NanowattPerSquareMillimetre,
        EnergyFluxUnit.FootPoundPerSquareFootPerSecond,
        EnergyFluxUnit.InchPoundPerSquareInchPerSecond,
    ),
)


class TemperatureGradientUnit(Unit):
    """Units of temperature gradient. The standard unit is the kelvin per metre."""

    KelvinPerMetre = "K/m"
    KelvinPerMillimetre = derive("K/mm", {TemperatureDifferenceUnit.Kelvin: 1, LengthUnit.Millimetre: -1})
    CelsiusPerMetre = derive("°C/m", {TemperatureDifferenceUnit.Celsius: 1, LengthUnit.Metre: -1})
    CelsiusPerMillimetre = derive("°C/mm", {TemperatureDifferenceUnit.Celsius: 1, LengthUnit.Millimetre: -1})
    RankinePerFoot = derive("°R/ft", {TemperatureDifferenceUnit.Rankine: 1, LengthUnit.Foot: -1})
    RankinePerInch = derive("°R/in", {TemperatureDifferenceUnit.Rankine: 1, LengthUnit.Inch: -1})
    FahrenheitPerFoot = derive("°F/ft", {TemperatureDifferenceUnit.Fahrenheit: 1, LengthUnit.Foot: -1})
    FahrenheitPerInch = derive("°F/in", {TemperatureDifferenceUnit.Fahrenheit: 1, LengthUnit.Inch: -1})


TemperatureGradientUnit.define(
    TemperatureGradientUnit.KelvinPerMetre,
    Dimensions(length=-1, temperature=1),
    spellings={
        TemperatureGradientUnit.RankinePerFoot: ("R/ft",),
        TemperatureGradientUnit.RankinePerInch: ("R/in",),
        TemperatureGradientUnit.FahrenheitPerFoot: ("F/ft",),
        TemperatureGradientUnit.FahrenheitPerInch: ("F/in",),
    },
    systems=(
        TemperatureGradientUnit.KelvinPerMetre,
        TemperatureGradientUnit.KelvinPerMillimetre,
        TemperatureGradientUnit.RankinePerFoot,
        TemperatureGradientUnit.RankinePerInch,
    ),
)


class ThermalConductivity(DimensionalScalar, unit=ThermalConductivityUnit):
    """The ability of a material to conduct heat."""


class HeatFlux(DimensionalScalar, unit=EnergyFluxUnit):
    """A rate of heat transfer per unit area. By Fourier's law, the product of a thermal conductivity and a
    temperature gradient, in magnitude."""


class TemperatureGradient(DimensionalScalar, unit=TemperatureGradientUnit):
    """A change in temperature per unit length."""

"""
Physical relationships between the quantity types. Importing this module registers them with
:mod:`physq.relations`; :mod:`physq` imports it so that every operator is available once the package is
imported.
"""
import numpy as np

from physq.relations import Multiply, Divide, derived, forward, product, quotient, rate, reciprocal, shift, total
from physq.Dimensions.angular import Angle
from physq.Dimensions.electric import ElectricCharge, ElectricCurrent
from physq.Dimensions.energy import Energy
from physq.Dimensions.force import Force
from physq.Dimensions.mass import Mass
from physq.Dimensions.memory import Memory, MemoryRate
from physq.Dimensions.ratios import HeatCapacityRatio, MachNumber, PrandtlNumber, ReynoldsNumber, ScalarStrain
from physq.Dimensions.spatial import Area, Length, Volume
from physq.Dimensions.temporal import Frequency, StrainRate, Time
from physq.Dimensions.thermal import LinearThermalExpansionCoefficient, Temperature, TemperatureDifference
from physq.ComplexDimensions.acceleration import Acceleration
from physq.ComplexDimensions.alpha import AngularAcceleration
from physq.ComplexDimensions.density import MassDensity
from physq.ComplexDimensions.heat import (
    GasConstant,
    IsobaricHeatCapacity,
    IsochoricHeatCapacity,
    SpecificGasConstant,
    SpecificIsobaricHeatCapacity,
    SpecificIsochoricHeatCapacity,
)
from physq.ComplexDimensions.kinematic_pressure import (
    DynamicKinematicPressure,
    KinematicPressureDifference,
    StaticKinematicPressure,
    TotalKinematicPressure,
)
from physq.ComplexDimensions.mass_rate import MassRate
from physq.ComplexDimensions.omega import AngularSpeed
from physq.ComplexDimensions.power import Power
from physq.ComplexDimensions.pressure import DynamicPressure, PressureDifference, StaticPressure, TotalPressure
from physq.ComplexDimensions.specific import SpecificEnergy, SpecificPower
from physq.ComplexDimensions.thermal_transport import HeatFlux, TemperatureGradient, ThermalConductivity
from physq.ComplexDimensions.transport_energy import TransportEnergyConsumption
from physq.ComplexDimensions.velocity import SoundSpeed, Speed
from physq.ComplexDimensions.viscosity import DynamicViscosity, KinematicViscosity, ThermalDiffusivity
from physq.ComplexDimensions.volume_rate import VolumeRate

reciprocal(Time, Frequency)

# Time rates: X / Time and X * Frequency
rate(Speed, Length)
rate(Acceleration, Speed)
rate(AngularSpeed, Angle)
rate(AngularAcceleration, AngularSpeed)
rate(MassRate, Mass)
rate(VolumeRate, Volume)
rate(MemoryRate, Memory)
rate(Power, Energy)
rate(SpecificPower, SpecificEnergy)
rate(StrainRate, ScalarStrain)
rate(ElectricCurrent, ElectricCharge)

# Geometry
product(Area, Length, Length)
product(Volume, Area, Length)

# Mechanics
product(Force, Mass, Acceleration)
product(Force, StaticPressure, Area)
product(Power, Force, Speed)
product(Mass, MassDensity, Volume)
product(MassRate, MassDensity, VolumeRate)
product(Energy, SpecificEnergy, Mass)
product(Power, SpecificPower, Mass)
quotient(TransportEnergyConsumption, Energy, Length)

# Work is force times distance, but energy per length is a transport energy consumption, not a force.
forward(Energy, Force, Multiply, Length)
forward(Energy, Length, Multiply, Force)
forward(Length, Energy, Divide, Force)

# Thermodynamics
product(IsobaricHeatCapacity, SpecificIsobaricHeatCapacity, Mass)
product(IsochoricHeatCapacity, SpecificIsochoricHeatCapacity, Mass)
product(GasConstant, SpecificGasConstant, Mass)
quotient(HeatCapacityRatio, IsobaricHeatCapacity, IsochoricHeatCapacity)
quotient(HeatCapacityRatio, SpecificIsobaricHeatCapacity, SpecificIsochoricHeatCapacity)
product(ScalarStrain, LinearThermalExpansionCoefficient, TemperatureDifference)

# Transport phenomena
product(DynamicViscosity, KinematicViscosity, MassDensity)
quotient(PrandtlNumber, KinematicViscosity, ThermalDiffusivity)
quotient(TemperatureGradient, TemperatureDifference, Length)
product(HeatFlux, ThermalConductivity, TemperatureGradient)

# Compressible flow
quotient(MachNumber, Speed, SoundSpeed)

# Mayer's relation: the isobaric heat capacity exceeds the isochoric one by the gas constant.
total(IsobaricHeatCapacity, IsochoricHeatCapacity, GasConstant)
total(SpecificIsobaricHeatCapacity, SpecificIsochoricHeatCapacity, SpecificGasConstant)


def _either_order(result, left, right, function):
    derived(result, (left, right), function)
    derived(result, (right, left), lambda second, first: function(first, second))


def _ideal_gas(isobaric, isochoric, gas_constant):
    _either_order(HeatCapacityRatio, isobaric, gas_constant, lambda cp, r: cp / (cp - r))
    _either_order(HeatCapacityRatio, isochoric, gas_constant, lambda cv, r: r / cv + 1.0)
    _either_order(gas_constant, HeatCapacityRatio, isobaric, lambda gamma, cp: (1.0 - 1.0 / gamma) * cp)
    _either_order(gas_constant, HeatCapacityRatio, isochoric, lambda gamma, cv: (gamma - 1.0) * cv)
    _either_order(isobaric, HeatCapacityRatio, gas_constant, lambda gamma, r: gamma * r / (gamma - 1.0))
    _either_order(isochoric, HeatCapacityRatio, gas_constant, lambda gamma, r: r / (gamma - 1.0))


_ideal_gas(IsobaricHeatCapacity, IsochoricHeatCapacity, GasConstant)
_ideal_gas(SpecificIsobaricHeatCapacity, SpecificIsochoricHeatCapacity, SpecificGasConstant)

# Temperatures are shifted by temperature differences.
shift(Temperature, TemperatureDifference)

# Fluid pressures. Kinematic pressures are pressures per unit mass density.
total(TotalPressure, StaticPressure, DynamicPressure)
shift(StaticPressure, PressureDifference)
quotient(StaticKinematicPressure, StaticPressure, MassDensity)
quotient(DynamicKinematicPressure, DynamicPressure, MassDensity)
quotient(TotalKinematicPressure, TotalPressure, MassDensity)
quotient(KinematicPressureDifference, PressureDifference, MassDensity)
total(TotalKinematicPressure, StaticKinematicPressure, DynamicKinematicPressure)
shift(StaticKinematicPressure, KinematicPressureDifference)

derived(DynamicPressure, (MassDensity, Speed), lambda density, speed: 0.5 * density * speed**2)
derived(Speed, (DynamicPressure, MassDensity), lambda pressure, density: np.sqrt(2.0 * pressure / density))
derived(MassDensity, (DynamicPressure, Speed), lambda pressure, speed: 2.0 * pressure / speed**2)
derived(DynamicKinematicPressure, (Speed,), lambda speed: 0.5 * speed**2)
derived(Speed, (DynamicKinematicPressure,), lambda pressure: np.sqrt(2.0 * pressure))

derived(
    ReynoldsNumber,
    (MassDensity, Speed, Length, DynamicViscosity),
    lambda density, speed, length, viscosity: density * speed * length / viscosity,
)
derived(
    ReynoldsNumber,
    (Speed, Length, KinematicViscosity),
    lambda speed, length, viscosity: speed * length / viscosity,
)

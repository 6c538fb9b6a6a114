from physq.core import DimensionalScalar
from physq.ComplexDimensions.specific import SpecificEnergyUnit


class StaticKinematicPressure(DimensionalScalar, unit=SpecificEnergyUnit):
    """A static pressure divided by the mass density of the fluid, as used in incompressible flow.
    Kinematic pressures are measured in units of specific energy, e.g. ``J/kg`` or ``m^2/s^2``."""


class DynamicKinematicPressure(DimensionalScalar, unit=SpecificEnergyUnit):
    """Half the square of the flow speed, ``DynamicKinematicPressure(Speed(10.0))``."""


class TotalKinematicPressure(DimensionalScalar, unit=SpecificEnergyUnit):
    """The sum of the static and dynamic kinematic pressures."""


class KinematicPressureDifference(DimensionalScalar, unit=SpecificEnergyUnit):
    """A difference between two static kinematic pressures."""

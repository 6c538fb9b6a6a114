from physq.core import DimensionlessScalar


class ScalarStrain(DimensionlessScalar):
    """The relative deformation of a material along one direction."""


class MachNumber(DimensionlessScalar):
    """The ratio of a speed to the local speed of sound."""


class PrandtlNumber(DimensionlessScalar):
    """The ratio of the kinematic viscosity of a fluid to its thermal diffusivity."""


class HeatCapacityRatio(DimensionlessScalar):
    """The ratio of the isobaric heat capacity to the isochoric heat capacity, also known as the adiabatic
    index."""


class ReynoldsNumber(DimensionlessScalar):
    """The ratio of inertial to viscous forces in a flow, ``ρ·v·L/μ`` or ``v·L/ν``."""

# Import quantities and units for easy access
from physq.dimension import Dimension, Dimensions, Dimensionless
from physq.system import UnitSystem
from physq.core import (
    DimensionalScalar,
    DimensionlessScalar,
    Quantity,
    Unit,
    convert,
    converter,
    derive,
    static_convert,
)
from physq.config import QuantityConfig, config_context, get_config, set_config
from physq.utils.formatting import Precision
from physq.Dimensions.temporal import *
from physq.Dimensions.spatial import *
from physq.Dimensions.mass import *
from physq.Dimensions.angular import *
from physq.Dimensions.electric import *
from physq.Dimensions.thermal import *
from physq.Dimensions.substance import *
from physq.Dimensions.memory import *
from physq.Dimensions.force import *
from physq.Dimensions.energy import *
from physq.Dimensions.ratios import *
from physq.ComplexDimensions.velocity import *
from physq.ComplexDimensions.acceleration import *
from physq.ComplexDimensions.omega import *
from physq.ComplexDimensions.alpha import *
from physq.ComplexDimensions.power import *
from physq.ComplexDimensions.pressure import *
from physq.ComplexDimensions.kinematic_pressure import *
from physq.ComplexDimensions.mass_rate import *
from physq.ComplexDimensions.volume_rate import *
from physq.ComplexDimensions.density import *
from physq.ComplexDimensions.specific import *
from physq.ComplexDimensions.heat import *
from physq.ComplexDimensions.viscosity import *
from physq.ComplexDimensions.thermal_transport import *
from physq.ComplexDimensions.transport_energy import *
from physq import formulas

__version__ = "0.1.0"

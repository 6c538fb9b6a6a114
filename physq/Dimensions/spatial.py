from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions


class LengthUnit(Unit):
    """Units of length. The standard unit is the metre."""

    Mile = "mi", 1609.344
    Kilometre = "km", 1000.0
    Yard = "yd", 0.9144
    Metre = "m"
    Foot = "ft", 0.3048
    Decimetre = "dm", 0.1
    Inch = "in", 0.0254
    Centimetre = "cm", 0.01
    Millimetre = "mm", 0.001
    Mil = "mil", 2.54e-5
    Micrometre = "μm", 1.0e-6
    Microinch = "μin", 2.54e-8


LengthUnit.define(
    LengthUnit.Metre,
    Dimensions(length=1),
    spellings={
        LengthUnit.Mile: ("mile", "miles"),
        LengthUnit.Kilometre: ("kilometre", "kilometres", "kilometer", "kilometers"),
        LengthUnit.Yard: ("yard", "yards"),
        LengthUnit.Metre: ("metre", "metres", "meter", "meters"),
        LengthUnit.Foot: ("feet", "foot", "'"),
        LengthUnit.Decimetre: ("decimetre", "decimeter"),
        LengthUnit.Inch: ("inch", "inches", '"'),
        LengthUnit.Centimetre: ("centimetre", "centimetres", "centimeter", "centimeters"),
        LengthUnit.Millimetre: ("millimetre", "millimetres", "millimeter", "millimeters"),
        LengthUnit.Mil: ("thou", "mils"),
        LengthUnit.Micrometre: ("micron", "microns", "micrometre", "micrometer"),
        LengthUnit.Microinch: ("microinch", "microinches"),
    },
    systems=(LengthUnit.Metre, LengthUnit.Millimetre, LengthUnit.Foot, LengthUnit.Inch),
)


class AreaUnit(Unit):
    """Units of area. The standard unit is the square metre."""

    SquareMile = derive("mi^2", {LengthUnit.Mile: 2})
    SquareKilometre = derive("km^2", {LengthUnit.Kilometre: 2})
    Hectare = "ha", 1.0e4
    Acre = "ac", 4046.8564224
    SquareYard = derive("yd^2", {LengthUnit.Yard: 2})
    SquareMetre = "m^2"
    SquareFoot = derive("ft^2", {LengthUnit.Foot: 2})
    SquareDecimetre = derive("dm^2", {LengthUnit.Decimetre: 2})
    SquareInch = derive("in^2", {LengthUnit.Inch: 2})
    SquareCentimetre = derive("cm^2", {LengthUnit.Centimetre: 2})
    SquareMillimetre = derive("mm^2", {LengthUnit.Millimetre: 2})
    SquareMil = derive("mil^2", {LengthUnit.Mil: 2})
    SquareMicrometre = derive("μm^2", {LengthUnit.Micrometre: 2})
    SquareMicroinch = derive("μin^2", {LengthUnit.Microinch: 2})


AreaUnit.define(
    AreaUnit.SquareMetre,
    Dimensions(length=2),
    spellings={
        AreaUnit.Hectare: ("hectare", "hectares"),
        AreaUnit.Acre: ("acre", "acres"),
        AreaUnit.SquareMetre: ("sq m", "square metre", "square meter"),
        AreaUnit.SquareFoot: ("sq ft", "square foot", "square feet"),
        AreaUnit.SquareInch: ("sq in", "square inch", "square inches"),
    },
    systems=(AreaUnit.SquareMetre, AreaUnit.SquareMillimetre, AreaUnit.SquareFoot, AreaUnit.SquareInch),
)


class VolumeUnit(Unit):
    """Units of volume. The standard unit is the cubic metre."""

    CubicMile = derive("mi^3", {LengthUnit.Mile: 3})
    CubicKilometre = derive("km^3", {LengthUnit.Kilometre: 3})
    CubicYard = derive("yd^3", {LengthUnit.Yard: 3})
    CubicMetre = "m^3"
    CubicFoot = derive("ft^3", {LengthUnit.Foot: 3})
    CubicDecimetre = derive("dm^3", {LengthUnit.Decimetre: 3})
    Litre = "L", 1.0e-3
    CubicInch = derive("in^3", {LengthUnit.Inch: 3})
    CubicCentimetre = derive("cm^3", {LengthUnit.Centimetre: 3})
    Millilitre = "mL", 1.0e-6
    CubicMillimetre = derive("mm^3", {LengthUnit.Millimetre: 3})
    CubicMil = derive("mil^3", {LengthUnit.Mil: 3})
    CubicMicrometre = derive("μm^3", {LengthUnit.Micrometre: 3})
    CubicMicroinch = derive("μin^3", {LengthUnit.Microinch: 3})


VolumeUnit.define(
    VolumeUnit.CubicMetre,
    Dimensions(length=3),
    spellings={
        VolumeUnit.Litre: ("l", "litre", "litres", "liter", "liters"),
        VolumeUnit.CubicCentimetre: ("cc",),
        VolumeUnit.Millilitre: ("ml", "millilitre", "millilitres", "milliliter", "milliliters"),
    },
    systems=(VolumeUnit.CubicMetre, VolumeUnit.CubicMillimetre, VolumeUnit.CubicFoot, VolumeUnit.CubicInch),
)


class Length(DimensionalScalar, unit=LengthUnit):
    """A distance, e.g. ``Length(3.0, LengthUnit.Foot)``."""


class Area(DimensionalScalar, unit=AreaUnit):
    """A surface area. The product of two lengths."""


class Volume(DimensionalScalar, unit=VolumeUnit):
    """A volume. The product of an area and a length."""

import numbers
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, total_ordering
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Type, Union

import numpy as np

from physq import relations
from physq.config import get_config
from physq.dimension import Dimensionless, Dimensions
from physq.system import UnitSystem
from physq.utils.formatting import Precision, format_number
from physq.utils.logging import Debug, Info


@dataclass(frozen=True)
class _Kind:
    standard: "Unit"
    dimensions: Dimensions
    spellings: Dict[str, "Unit"]
    folded: Dict[str, "Unit"]
    consistent: Dict[UnitSystem, "Unit"]


_KINDS: Dict[type, _Kind] = {}
_PRIMARY: Dict[type, type] = {}

# Significant decimal digits kept by an offset conversion. Digits past this are rounding noise from
# cancelling the offset, e.g. 32 °F is 273.15 K, which has no exact binary value.
_SIGNIFICANT_DIGITS = 15


def _offset_decimals(scale: float, offset: float) -> Optional[int]:
    if offset == 0.0:
        return None
    magnitude = max(abs(offset), abs(offset / scale))
    return _SIGNIFICANT_DIGITS - int(np.floor(np.log10(magnitude))) - 1


def _round_offset(value, decimals: Optional[int]):
    if decimals is None:
        return value
    # Adding zero turns a rounded -0.0 into 0.0.
    return np.round(value, decimals) + 0.0


class Unit(Enum):
    """
    Base of every unit of measure enumeration. Each subclass enumerates the interchangeable units of one
    kind of quantity, e.g. :class:`LengthUnit`. A member is declared with its abbreviation, its scale
    relative to the standard unit of the kind and, for offset scales such as degrees Celsius, its offset:

    .. code-block:: python

        class LengthUnit(Unit):
            Metre = "m"
            Foot = "ft", 0.3048

    The value of a member is its abbreviation, so ``LengthUnit("ft")`` is ``LengthUnit.Foot``. The kind is
    completed by :meth:`define`, which registers its standard unit, dimensions and spellings.
    """

    def __new__(cls, abbreviation: str, scale: float = 1.0, offset: float = 0.0):
        member = object.__new__(cls)
        member._value_ = abbreviation
        member._scale = float(scale)
        member._offset = float(offset)
        member._decimals = _offset_decimals(member._scale, member._offset)
        return member

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and cls in _KINDS:
            return cls.parse(value)
        return None

    @classmethod
    def define(
        cls,
        standard: "Unit",
        dimensions: Dimensions,
        spellings: Optional[Mapping["Unit", Iterable[str]]] = None,
        systems: Optional[Sequence["Unit"]] = None,
    ) -> None:
        """Registers the metadata of a unit kind. Called once, right after the enumeration is declared.

        :param standard: The unit quantity values of this kind are stored in. Its scale must be one and
            its offset zero.
        :type standard: :class:`Unit`
        :param dimensions: The physical dimensions of the kind.
        :type dimensions: :class:`Dimensions`
        :param spellings: Extra spellings recognized by :meth:`parse`, per unit. Abbreviations are always
            recognized.
        :type spellings: Mapping[:class:`Unit`, Iterable[str]], optional
        :param systems: The consistent unit in each :class:`UnitSystem`, in enumeration order. Defaults to
            the standard unit for every system.
        :type systems: Sequence[:class:`Unit`], optional
        :raises ValueError: If the standard unit is scaled, a spelling is ambiguous or the wrong number of
            system units is given.
        :raises TypeError: If a unit does not belong to this kind.
        """
        cls._check_member(standard)
        if standard.scale != 1.0 or standard.offset != 0.0:
            raise ValueError(f"Standard unit {standard!r} must have a scale of 1 and no offset.")

        index = {member.abbreviation: member for member in cls}
        for member, words in (spellings or {}).items():
            cls._check_member(member)
            for word in words:
                existing = index.get(word)
                if existing is not None and existing is not member:
                    raise ValueError(f"Spelling '{word}' of {member!r} is already used by {existing!r}.")
                index[word] = member

        folded: Dict[str, set] = {}
        for word, member in index.items():
            folded.setdefault(word.casefold(), set()).add(member)
        for word, members in folded.items():
            if len(members) > 1:
                Debug("%s spelling '%s' is ambiguous ignoring case, matched exactly only", cls.__name__, word)

        if systems is None:
            systems = (standard,) * len(UnitSystem)
        if len(systems) != len(UnitSystem):
            raise ValueError(f"Expected {len(UnitSystem)} system units for {cls.__name__}, got {len(systems)}.")
        for member in systems:
            cls._check_member(member)

        _KINDS[cls] = _Kind(
            standard=standard,
            dimensions=dimensions,
            spellings=index,
            folded={word: members.pop() for word, members in folded.items() if len(members) == 1},
            consistent=dict(zip(UnitSystem, systems)),
        )

    @classmethod
    def _check_member(cls, member) -> None:
        if not isinstance(member, cls):
            raise TypeError(f"{member!r} is not a {cls.__name__}.")

    @classmethod
    def _kind(cls) -> _Kind:
        kind = _KINDS.get(cls)
        if kind is None:
            raise TypeError(f"{cls.__name__} has not been defined.")
        return kind

    @classmethod
    def standard(cls) -> "Unit":
        return cls._kind().standard

    @classmethod
    def dimensions(cls) -> Dimensions:
        return cls._kind().dimensions

    @classmethod
    def spellings(cls) -> Dict[str, "Unit"]:
        return dict(cls._kind().spellings)

    @classmethod
    def consistent(cls, system: UnitSystem) -> "Unit":
        """Returns the unit of this kind consistent with a unit system."""
        return cls._kind().consistent[UnitSystem(system)]

    @classmethod
    def quantity(cls) -> type:
        """Returns the primary quantity type of this kind, the type built by calling a unit."""
        quantity = _PRIMARY.get(cls)
        if quantity is None:
            raise TypeError(f"No quantity type is bound to {cls.__name__}.")
        return quantity

    @classmethod
    def parse(cls, text: str) -> Optional["Unit"]:
        """Looks up a unit from a spelling such as ``"m/s"``, ``"m / s"``, ``"ft*lbf"`` or ``"um"``.

        The exact spelling is tried first, then the spelling with symbols normalized (``*``, ``.`` and
        spaces as ``·``, ``u`` as the micro prefix ``μ``, ``deg`` and ``°`` interchangeably, ``²`` and
        ``³`` as powers), then a case-insensitive match if it is unambiguous and enabled.

        :param text: The spelling to look up.
        :type text: str
        :return: The unit, or None if the spelling is unknown.
        :rtype: :class:`Unit`, optional
        """
        kind = cls._kind()
        text = text.strip()
        unit = kind.spellings.get(text)
        if unit is not None:
            return unit

        candidates = _normalizations(text)
        for candidate in candidates:
            unit = kind.spellings.get(candidate)
            if unit is not None:
                return unit
        if get_config().case_insensitive_parsing:
            for candidate in candidates:
                unit = kind.folded.get(candidate.casefold())
                if unit is not None:
                    Info("Matched %s spelling '%s' to '%s' ignoring case", cls.__name__, text, unit)
                    return unit

        Debug("Unknown %s spelling '%s'", cls.__name__, text)
        return None

    @property
    def abbreviation(self) -> str:
        return self._value_

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def system(self) -> Optional[UnitSystem]:
        """The unit system this unit is exclusively consistent with, or None if it belongs to none or several."""
        systems = [system for system, unit in self._kind().consistent.items() if unit is self]
        return systems[0] if len(systems) == 1 else None

    def to_standard(self, value):
        return _round_offset(value * self._scale + self._offset, self._decimals)

    def from_standard(self, value):
        return _round_offset((value - self._offset) / self._scale, self._decimals)

    def __call__(self, magnitude, dtype=None):
        """Creates a quantity of this unit's kind, e.g. ``LengthUnit.Metre(2.0)``."""
        return type(self).quantity()(magnitude, self, dtype=dtype)

    def __str__(self) -> str:
        return self._value_


_SEPARATORS = re.compile(r"\s*[*.]\s*|\s+")
_OPERATORS = re.compile(r"\s*([/^])\s*")
_MICRO = re.compile(r"(?<![A-Za-z])u(?=[A-Za-z])")


def _normalizations(text: str) -> Tuple[str, ...]:
    text = _OPERATORS.sub(r"\1", text)
    text = _SEPARATORS.sub("·", text)
    text = _MICRO.sub("μ", text.replace("µ", "μ"))
    text = text.replace("²", "^2").replace("³", "^3")
    candidates = [text, text.replace("deg", "°"), text.replace("°", "deg")]
    return tuple(dict.fromkeys(candidates))


def convert(value, from_unit: Unit, to_unit: Unit):
    """Converts a value between two units of the same kind through the standard unit.

    :param value: The value to convert. Numbers, numpy scalars and numpy arrays are supported; sequences
        are converted element-wise.
    :param from_unit: The unit the value is expressed in.
    :type from_unit: :class:`Unit`
    :param to_unit: The unit to express the value in.
    :type to_unit: :class:`Unit`
    :raises TypeError: If the units are of different kinds.
    :return: The converted value, or the value itself if both units are the same.
    """
    if from_unit is to_unit:
        return value
    _check_same_kind(from_unit, to_unit)
    if isinstance(value, (list, tuple)):
        value = np.asarray(value, dtype=np.float64)
    return to_unit.from_standard(from_unit.to_standard(value))


def _check_same_kind(from_unit: Unit, to_unit: Unit) -> None:
    if type(from_unit) is not type(to_unit):
        raise TypeError(f"Cannot convert {type(from_unit).__name__} '{from_unit}' to {type(to_unit).__name__} '{to_unit}'.")


@lru_cache(maxsize=None)
def converter(from_unit: Unit, to_unit: Unit) -> Callable:
    """Returns a function converting values from one unit to another, with the two conversions precomposed
    into a single scale and offset.
    """
    if from_unit is to_unit:
        return lambda value: value
    _check_same_kind(from_unit, to_unit)
    scale = from_unit.scale / to_unit.scale
    offset = (from_unit.offset - to_unit.offset) / to_unit.scale
    if offset == 0.0:
        return lambda value: value * scale
    decimals = min(unit._decimals for unit in (from_unit, to_unit) if unit._decimals is not None)
    return lambda value: _round_offset(value * scale + offset, decimals)


def static_convert(value, from_unit: Unit, to_unit: Unit):
    """Converts a value between two units of the same kind with the cached :func:`converter`."""
    return converter(from_unit, to_unit)(value)


def derive(abbreviation: str, units: Mapping[Unit, int]) -> Tuple[str, float]:
    """Builds the declaration of a compound unit from the units it is made of, e.g.
    ``derive("ft·lbf", {LengthUnit.Foot: 1, ForceUnit.PoundForce: 1})``.

    :param abbreviation: The abbreviation of the compound unit.
    :param units: Each constituent unit with its power.
    :raises ValueError: If a constituent unit has an offset.
    :return: The abbreviation and the scale of the compound unit relative to its standard unit.
    :rtype: Tuple[str, float]
    """
    scale = 1.0
    for unit, power in units.items():
        if unit.offset != 0.0:
            raise ValueError(f"Offset unit '{unit}' cannot be part of compound unit '{abbreviation}'.")
        scale *= unit.scale**power
    return abbreviation, scale


def _cast(value, dtype=None):
    if dtype is None:
        dtype = value.dtype if isinstance(value, np.floating) else get_config().default_dtype
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"Quantity values must have a floating dtype, got {dtype}.")
    return dtype.type(value)


def _check_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}.")


def _divide(numerator, denominator):
    if denominator == 0:
        Debug("Division of %s by zero", numerator)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(numerator, denominator)


_OPERATIONS = {
    relations.Multiply: np.multiply,
    relations.Divide: _divide,
    relations.Add: np.add,
    relations.Subtract: np.subtract,
}


def _evaluate(formula: relations.Formula, left: "Quantity", right: "Quantity"):
    dtype = np.result_type(left._value, right._value)
    value = _OPERATIONS[formula.operator](left._value, right._value)
    if formula.result is None:
        return dtype.type(value)
    return formula.result._wrap(value, dtype)


@total_ordering
class Quantity:
    """
    Common algebra of dimensional and dimensionless scalar quantities. A quantity holds a single numpy
    floating-point value. Quantities of the same type add, subtract and compare; any quantity scales by a
    number; quantities of different types combine only through registered formulas. Unsupported
    operands make the operator return ``NotImplemented`` so that Python raises ``TypeError``.
    """

    __slots__ = ("_value",)
    __array_ufunc__ = None

    def __init__(self, *arguments, dtype=None) -> None:
        if not arguments:
            value = 0.0
        elif all(isinstance(argument, Quantity) for argument in arguments):
            value = self._relate(*arguments)
        else:
            value = self._magnitude(*arguments)
        self._value = _cast(value, dtype)

    def _magnitude(self, value, *arguments):
        if arguments:
            raise TypeError(f"{type(self).__name__} takes a single number, got {len(arguments) + 1} arguments.")
        _check_number(value)
        return value

    def _relate(self, *operands):
        cls = type(self)
        if len(operands) == 1:
            operand = operands[0]
            if type(operand) is cls:
                return operand._value
            if relations.reciprocal_of(type(operand)) is cls:
                return _divide(operand._value.dtype.type(1), operand._value)
        elif len(operands) == 2:
            left, right = operands
            formula = relations.producing(cls, type(left), type(right))
            if formula is not None:
                return _evaluate(formula, left, right)._value
        function = relations.deriving(cls, [type(operand) for operand in operands])
        if function is not None:
            with np.errstate(divide="ignore", invalid="ignore"):
                return function(*(operand._value for operand in operands))
        names = ", ".join(type(operand).__name__ for operand in operands)
        raise TypeError(f"No formula yields {cls.__name__} from ({names}).")

    @classmethod
    def _wrap(cls, value, dtype=None):
        quantity = cls.__new__(cls)
        quantity._value = _cast(value, dtype)
        return quantity

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def dimensions(cls) -> Dimensions:
        return Dimensionless

    @property
    def value(self):
        """The raw value, expressed in the standard unit."""
        return self._value

    @value.setter
    def value(self, value) -> None:
        _check_number(value)
        self._value = _cast(value, self._value.dtype)

    def set_value(self, value) -> None:
        self.value = value

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    def _resolve_precision(self, precision):
        if precision is None:
            precision = get_config().precision
        return Precision(precision) if precision is not None else None

    # --- Arithmetic ---

    def _combine(self, operator: str, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        formula = relations.lookup(type(self), operator, type(other))
        if formula is not None:
            return _evaluate(formula, self, other)
        if type(other) is not type(self):
            return NotImplemented
        value = _OPERATIONS[operator](self._value, other._value)
        return self._wrap(value, np.result_type(self._value, other._value))

    def _accumulate(self, operator: str, other):
        # In place only when the result keeps the type of this quantity.
        if not isinstance(other, Quantity):
            return NotImplemented
        formula = relations.lookup(type(self), operator, type(other))
        if formula is None and type(other) is not type(self):
            return NotImplemented
        if formula is not None and formula.result is not type(self):
            return NotImplemented
        self._value = _cast(_OPERATIONS[operator](self._value, other._value), self._value.dtype)
        return self

    def __add__(self, other):
        return self._combine(relations.Add, other)

    def __sub__(self, other):
        return self._combine(relations.Subtract, other)

    def __iadd__(self, other):
        return self._accumulate(relations.Add, other)

    def __isub__(self, other):
        return self._accumulate(relations.Subtract, other)

    def __neg__(self):
        return self._wrap(-self._value)

    def __pos__(self):
        return self._wrap(self._value)

    def __abs__(self):
        return self._wrap(abs(self._value))

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(np.multiply(self._value, other), self._value.dtype)
        if isinstance(other, Quantity):
            formula = relations.lookup(type(self), relations.Multiply, type(other))
            if formula is not None:
                return _evaluate(formula, self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(np.multiply(other, self._value), self._value.dtype)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(_divide(self._value, other), self._value.dtype)
        if type(other) is type(self):
            return np.result_type(self._value, other._value).type(_divide(self._value, other._value))
        if isinstance(other, Quantity):
            formula = relations.lookup(type(self), relations.Divide, type(other))
            if formula is not None:
                return _evaluate(formula, self, other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            inverse = relations.reciprocal_of(type(self))
            if inverse is not None:
                return inverse._wrap(_divide(self._value.dtype.type(other), self._value))
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._value = _cast(np.multiply(self._value, other), self._value.dtype)
        return self

    def __itruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._value = _cast(_divide(self._value, other), self._value.dtype)
        return self

    # --- Comparison ---

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)


class DimensionalScalar(Quantity):
    """
    A scalar physical quantity tied to a unit kind. Subclasses bind to their kind with a class keyword:

    .. code-block:: python

        class Length(DimensionalScalar, unit=LengthUnit):
            pass

    The first type bound to a kind is its primary type, built when a unit is called, e.g.
    ``LengthUnit.Foot(3.0)``. A quantity is constructed from a value and a unit, from a value already in
    the standard unit, or from other quantities through a registered formula:

    .. code-block:: python

        Length(3.0, LengthUnit.Foot)
        Speed(Length(10.0, LengthUnit.Metre), Time(2.0, TimeUnit.Second))
    """

    __slots__ = ()
    _units: Type[Unit] = None

    def __init_subclass__(cls, unit: Type[Unit] = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if unit is not None:
            cls._units = unit
            _PRIMARY.setdefault(unit, cls)

    def _magnitude(self, value, unit=None, *arguments):
        if arguments:
            raise TypeError(f"{type(self).__name__} takes a value and a unit, got {len(arguments) + 2} arguments.")
        _check_number(value)
        if unit is None:
            return value
        return convert(value, self._unit_of(unit), self.unit())

    @classmethod
    def _unit_of(cls, unit: Union[Unit, UnitSystem, str]) -> Unit:
        if isinstance(unit, UnitSystem):
            return cls._units.consistent(unit)
        if isinstance(unit, str):
            return cls._units(unit)
        if not isinstance(unit, cls._units):
            raise TypeError(f"{cls.__name__} cannot be expressed in {type(unit).__name__} '{unit}'.")
        return unit

    @classmethod
    def create(cls, unit: Unit, value, dtype=None):
        """Creates a quantity from a value in a unit, converting with the cached :func:`converter`."""
        _check_number(value)
        return cls._wrap(static_convert(value, cls._unit_of(unit), cls.unit()), dtype)

    @classmethod
    def unit(cls) -> Unit:
        """Returns the standard unit of this quantity type."""
        return cls._units.standard()

    @classmethod
    def units(cls) -> Type[Unit]:
        """Returns the unit enumeration of this quantity type."""
        return cls._units

    @classmethod
    def dimensions(cls) -> Dimensions:
        return cls._units.dimensions()

    def value_in(self, unit: Union[Unit, UnitSystem, str]):
        """Returns the value expressed in a unit, or in the unit consistent with a unit system.

        :param unit: The unit, unit system or unit spelling.
        :type unit: :class:`Unit`, :class:`UnitSystem` or str
        :return: The converted value, with the dtype of this quantity.
        """
        return self._value.dtype.type(convert(self._value, self.unit(), self._unit_of(unit)))

    def static_value(self, unit: Union[Unit, UnitSystem, str]):
        """Returns the value expressed in a unit, converting with the cached :func:`converter`."""
        return self._value.dtype.type(static_convert(self._value, self.unit(), self._unit_of(unit)))

    def _printable(self, unit, precision) -> Tuple[str, str]:
        unit = self.unit() if unit is None else self._unit_of(unit)
        return format_number(self.value_in(unit), self._resolve_precision(precision)), unit.abbreviation

    def print(self, unit=None, precision: Optional[Precision] = None) -> str:
        """Prints the quantity as a number followed by a unit abbreviation, e.g. ``"1.500000000000000 m"``.

        :param unit: The unit, or unit system, to print in. Defaults to the standard unit.
        :type unit: :class:`Unit` or :class:`UnitSystem`, optional
        :param precision: The precision to print with. Defaults to the configured precision, or to the
            precision of the value's dtype.
        :type precision: :class:`Precision`, optional
        :rtype: str
        """
        number, abbreviation = self._printable(unit, precision)
        return f"{number} {abbreviation}"

    def json(self, unit=None, precision: Optional[Precision] = None) -> str:
        number, abbreviation = self._printable(unit, precision)
        return f'{{"value":{number},"unit":"{abbreviation}"}}'

    def xml(self, unit=None, precision: Optional[Precision] = None) -> str:
        number, abbreviation = self._printable(unit, precision)
        return f"<value>{number}</value><unit>{abbreviation}</unit>"

    def yaml(self, unit=None, precision: Optional[Precision] = None) -> str:
        number, abbreviation = self._printable(unit, precision)
        return f'{{value:{number},unit:"{abbreviation}"}}'

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self._value)!r}, {self.unit().abbreviation!r})"

    def __format__(self, format_spec: str) -> str:
        return f"{format(float(self._value), format_spec)} {self.unit().abbreviation}"


class DimensionlessScalar(Quantity):
    """
    A scalar ratio without units, such as a Mach number or a strain. It has the same algebra as a
    :class:`DimensionalScalar` and prints as a bare number.
    """

    __slots__ = ()

    def print(self, precision: Optional[Precision] = None) -> str:
        return format_number(self._value, self._resolve_precision(precision))

    def json(self, precision: Optional[Precision] = None) -> str:
        return f'{{"value":{self.print(precision)}}}'

    def xml(self, precision: Optional[Precision] = None) -> str:
        return f"<value>{self.print(precision)}</value>"

    def yaml(self, precision: Optional[Precision] = None) -> str:
        return f"{{value:{self.print(precision)}}}"

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self._value)!r})"

    def __format__(self, format_spec: str) -> str:
        return format(float(self._value), format_spec)

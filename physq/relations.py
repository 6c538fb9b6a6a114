"""
Table of physical relationships between quantity types. Each entry states that combining a quantity of
one type with a quantity of another type through ``*``, ``/``, ``+`` or ``-`` yields a quantity of a result
type, or a plain number when the result is None. Relationships that are not a single operator, such as a
Reynolds number from a density, a speed, a length and a viscosity, are registered as derivations. Operators
and relational constructors of every quantity are resolved from this table.
"""
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from physq.dimension import Dimensionless
from physq.utils.logging import Debug

Multiply = "*"
Divide = "/"
Add = "+"
Subtract = "-"

_OPERATORS = (Multiply, Divide, Add, Subtract)


class Formula(NamedTuple):
    """A single registered relationship ``result = left <operator> right``."""

    result: Optional[type]
    left: type
    operator: str
    right: type

    def __str__(self) -> str:
        result = self.result.__name__ if self.result is not None else "number"
        return f"{result} = {self.left.__name__} {self.operator} {self.right.__name__}"


_FORMULAS: Dict[Tuple[type, str, type], Formula] = {}
_RECIPROCALS: Dict[type, type] = {}
_DERIVATIONS: Dict[Tuple[type, Tuple[type, ...]], Callable] = {}


def _name(kind: Optional[type]) -> str:
    return kind.__name__ if kind is not None else "number"


def forward(result: Optional[type], left: type, operator: str, right: type) -> Formula:
    """Registers a single direction of a relationship.

    :param result: The quantity type produced, or None for a plain number.
    :param left: The type of the left operand.
    :param operator: One of ``"*"``, ``"/"``, ``"+"`` and ``"-"``. Operands of ``"+"`` and ``"-"`` must
        share their dimensions.
    :param right: The type of the right operand.
    :raises ValueError: If the operator is unknown, the dimensions of the operands do not combine into
        those of the result, or a different result is already registered for the same operands.
    :return: The registered formula.
    :rtype: :class:`Formula`
    """
    if operator == Multiply:
        combined = left.dimensions() * right.dimensions()
    elif operator == Divide:
        combined = left.dimensions() / right.dimensions()
    elif operator in (Add, Subtract):
        combined = left.dimensions()
        if right.dimensions() != combined:
            raise ValueError(
                f"Cannot register {left.__name__} {operator} {right.__name__}, "
                f"dimensions {combined} and {right.dimensions()} differ."
            )
    else:
        raise ValueError(f"Unknown operator '{operator}', expected one of {', '.join(_OPERATORS)}.")
    expected = result.dimensions() if result is not None else Dimensionless
    if combined != expected:
        raise ValueError(
            f"{left.__name__} {operator} {right.__name__} has dimensions {combined}, "
            f"but {_name(result)} has dimensions {expected}."
        )

    formula = Formula(result, left, operator, right)
    existing = _FORMULAS.get((left, operator, right))
    if existing is not None:
        if existing.result is result:
            return existing
        raise ValueError(f"Cannot register '{formula}', '{existing}' is already registered.")
    _FORMULAS[(left, operator, right)] = formula
    Debug("Registered formula %s", formula)
    return formula


def product(result: type, left: type, right: type) -> None:
    """Registers ``result = left * right`` with both operand orders and both inverse divisions."""
    forward(result, left, Multiply, right)
    forward(result, right, Multiply, left)
    forward(right, result, Divide, left)
    forward(left, result, Divide, right)


def quotient(result: type, left: type, right: type) -> None:
    """Registers ``result = left / right``, the products recovering ``left`` and the division recovering ``right``."""
    forward(result, left, Divide, right)
    forward(left, result, Multiply, right)
    forward(left, right, Multiply, result)
    forward(right, left, Divide, result)


def rate(result: type, quantity: type) -> None:
    """Registers a time rate: ``result = quantity / Time`` and ``result = quantity * Frequency``."""
    from physq.Dimensions.temporal import Frequency, Time

    quotient(result, quantity, Time)
    product(result, quantity, Frequency)


def total(result: type, left: type, right: type) -> None:
    """Registers ``result = left + right`` with both operand orders and both differences recovering an
    operand, e.g. a total pressure as the sum of a static and a dynamic pressure.
    """
    forward(result, left, Add, right)
    forward(result, right, Add, left)
    forward(right, result, Subtract, left)
    forward(left, result, Subtract, right)


def shift(kind: type, difference: type) -> None:
    """Registers a quantity measured from an origin together with the type of its differences.

    ``kind + difference``, ``difference + kind`` and ``kind - difference`` yield ``kind``, and
    ``kind - kind`` yields ``difference``. Temperatures and temperature differences relate this way.
    """
    forward(kind, kind, Add, difference)
    forward(kind, difference, Add, kind)
    forward(kind, kind, Subtract, difference)
    forward(difference, kind, Subtract, kind)


def derived(result: type, operands: Sequence[type], function: Callable) -> None:
    """Registers a relational constructor that is not a single operator.

    :param result: The quantity type constructed.
    :param operands: The types of the constructor arguments, in order.
    :param function: Computes the value of the result from the values of the operands, all in standard
        units.
    :raises ValueError: If a different function is already registered for the same operands.
    """
    key = (result, tuple(operands))
    existing = _DERIVATIONS.get(key)
    if existing is not None and existing is not function:
        names = ", ".join(operand.__name__ for operand in key[1])
        raise ValueError(f"A derivation of {result.__name__} from ({names}) is already registered.")
    _DERIVATIONS[key] = function
    Debug("Registered derivation of %s from (%s)", result.__name__, ", ".join(kind.__name__ for kind in key[1]))


def reciprocal(left: type, right: type) -> None:
    """Registers two mutually reciprocal types, e.g. time and frequency.

    ``1 / left`` yields ``right``, ``1 / right`` yields ``left`` and their product is a plain number.
    """
    for kind, inverse in ((left, right), (right, left)):
        existing = _RECIPROCALS.get(kind)
        if existing is not None and existing is not inverse:
            raise ValueError(f"{kind.__name__} is already the reciprocal of {existing.__name__}.")
    forward(None, left, Multiply, right)
    forward(None, right, Multiply, left)
    _RECIPROCALS[left] = right
    _RECIPROCALS[right] = left


def lookup(left: type, operator: str, right: type) -> Optional[Formula]:
    """Finds the formula combining two operand types, considering their base classes.

    :return: The formula, or None if the operands are unrelated.
    """
    for left_kind in left.__mro__:
        for right_kind in right.__mro__:
            formula = _FORMULAS.get((left_kind, operator, right_kind))
            if formula is not None:
                return formula
    return None


def producing(result: type, left: type, right: type) -> Optional[Formula]:
    """Finds the formula that yields ``result`` from operands of the given types.

    Division is tried first, then multiplication, subtraction and addition, so that ``GasConstant(cp, cv)``
    is the difference of the heat capacities.
    """
    for operator in (Divide, Multiply, Subtract, Add):
        formula = lookup(left, operator, right)
        if formula is not None and formula.result is result:
            return formula
    return None


def deriving(result: type, operands: Sequence[type]) -> Optional[Callable]:
    """Returns the function registered by :func:`derived` for these exact operand types, or None."""
    return _DERIVATIONS.get((result, tuple(operands)))


def reciprocal_of(kind: type) -> Optional[type]:
    for base in kind.__mro__:
        inverse = _RECIPROCALS.get(base)
        if inverse is not None:
            return inverse
    return None


def formulas() -> List[Formula]:
    """Returns every registered formula, in registration order."""
    return list(_FORMULAS.values())


def derivations() -> List[Tuple[type, Tuple[type, ...]]]:
    """Returns the result and operand types of every registered derivation, in registration order."""
    return list(_DERIVATIONS)

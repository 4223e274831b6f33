"""
Rational — Exact Fraction Value Type

Foundation of the matrix core. Every matrix entry is a Rational, so all
zero / one / equality tests are exact and no epsilon is ever needed.

Immutable wrapper over fractions.Fraction that only admits int operands:
floats and bools are rejected so no inexact value can enter a matrix.

CRITICAL INVARIANTS:
1. denominator > 0, stored in lowest terms (Fraction normalization)
2. Zero is stored as 0/1
3. Instances are immutable: every operation returns a new Rational
4. No implicit float conversion inside arithmetic
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Union


RationalLike = Union["Rational", int]


# =============================================================================
# HELPERS
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool is a subclass of int, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def _coerce(value: object) -> "Rational":
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    raise TypeError(f"Cannot use {type(value).__name__} as Rational operand")


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Rational:
    """
    Exact fraction numerator/denominator in lowest terms.

    Examples:
        >>> Rational(2, 4)
        Rational(1, 2)
        >>> Rational(3, -6)
        Rational(-1, 2)
        >>> Rational(0, -7)
        Rational(0, 1)

    Raises:
        TypeError: numerator or denominator is not an int
        ZeroDivisionError: denominator == 0
    """

    value: Fraction

    def __init__(self, numerator: int, denominator: int = 1):
        _require_int(numerator, "numerator")
        _require_int(denominator, "denominator")
        if denominator == 0:
            raise ZeroDivisionError(f"Rational with zero denominator: {numerator}/0")
        object.__setattr__(self, "value", Fraction(numerator, denominator))

    @classmethod
    def _wrap(cls, value: Fraction) -> "Rational":
        return cls(value.numerator, value.denominator)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        """Rational with denominator 1."""
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1, 1)

    # -------------------------------------------------------------------------
    # Components & predicates
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_integer(self) -> bool:
        return self.value.denominator == 1

    def is_negative(self) -> bool:
        return self.value < 0

    def equals(self, other: RationalLike) -> bool:
        """Exact equality (int operands allowed)."""
        return self.value == _coerce(other).value

    def compare(self, other: RationalLike) -> int:
        """
        Three-way exact comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        other_value = _coerce(other).value
        return (self.value > other_value) - (self.value < other_value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self.value + _coerce(other).value)

    def subtract(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self.value - _coerce(other).value)

    def multiply(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self.value * _coerce(other).value)

    def divide(self, other: RationalLike) -> "Rational":
        """
        Exact division.

        Raises:
            ZeroDivisionError: other is zero
        """
        return Rational._wrap(self.value / _coerce(other).value)

    def negate(self) -> "Rational":
        return Rational._wrap(-self.value)

    def absolute_value(self) -> "Rational":
        return Rational._wrap(abs(self.value))

    def reciprocal(self) -> "Rational":
        """
        Multiplicative inverse.

        Raises:
            ZeroDivisionError: self is zero
        """
        if self.is_zero():
            raise ZeroDivisionError("Reciprocal of zero Rational")
        return Rational._wrap(1 / self.value)

    # -------------------------------------------------------------------------
    # Python operators
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Rational":
        try:
            return self.add(_coerce(other))
        except TypeError:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Rational":
        try:
            return self.subtract(_coerce(other))
        except TypeError:
            return NotImplemented

    def __rsub__(self, other: object) -> "Rational":
        try:
            return _coerce(other).subtract(self)
        except TypeError:
            return NotImplemented

    def __mul__(self, other: object) -> "Rational":
        try:
            return self.multiply(_coerce(other))
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Rational":
        try:
            other_r = _coerce(other)
        except TypeError:
            return NotImplemented
        return self.divide(other_r)

    def __rtruediv__(self, other: object) -> "Rational":
        try:
            other_r = _coerce(other)
        except TypeError:
            return NotImplemented
        return other_r.divide(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.absolute_value()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Rational, int)) and not isinstance(other, bool):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Fraction hashes like int for whole values, matching __eq__
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        try:
            return self.value < _coerce(other).value
        except TypeError:
            return NotImplemented

    def __le__(self, other: object) -> bool:
        try:
            return self.value <= _coerce(other).value
        except TypeError:
            return NotImplemented

    def __gt__(self, other: object) -> bool:
        try:
            return self.value > _coerce(other).value
        except TypeError:
            return NotImplemented

    def __ge__(self, other: object) -> bool:
        try:
            return self.value >= _coerce(other).value
        except TypeError:
            return NotImplemented

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        """Lossy conversion, used only for display fallbacks."""
        return float(self.value)

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

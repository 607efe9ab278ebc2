"""
Exact rational numbers for Gaussian elimination.

A Fraction is an immutable numerator/denominator pair of Python ints that is
always kept in canonical form:

- the denominator is strictly positive (the sign lives in the numerator)
- numerator and denominator share no common divisor
- zero is stored as 0/1

Every arithmetic operation cross-multiplies and hands the result back to the
constructor, so normalization happens in exactly one place.
"""

import locale
import math
import numbers
import operator
from typing import Union


class Fraction:
    """
    Exact rational value with canonical normalization.

    Supports the named operations (add, subtract, multiply, divide, negate) as
    well as the matching Python operators. Plain integers are accepted on either
    side of an operator and are converted with Fraction.from_int.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int = 0, denominator: int = 1):
        """
        Create a normalized fraction.

        Args:
            numerator: Integer numerator
            denominator: Integer denominator (default 1), must not be zero

        Raises:
            ZeroDivisionError: If denominator is zero
            TypeError: If numerator or denominator is not an integer
        """
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise ZeroDivisionError("Cannot have a denominator 0.")

        # gcd(0, d) == |d|, which turns any zero fraction into 0/1
        gcd = math.gcd(abs(numerator), abs(denominator))
        sign = 1 if denominator > 0 else -1
        self._numerator = numerator * sign // gcd
        self._denominator = abs(denominator) // gcd

    @property
    def numerator(self) -> int:
        """Returns the numerator, carrying the sign of the fraction"""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Returns the denominator, always positive"""
        return self._denominator

    # Conversions
    @classmethod
    def from_int(cls, value: int) -> 'Fraction':
        """Convert an integer i to i/1"""
        return cls(value, 1)

    @staticmethod
    def value_of(value: Union[int, str, 'Fraction']) -> 'Fraction':
        """
        Factory method creating a Fraction from an int, a Fraction or a string.

        Strings may be written as "num/den" or "num". Thousands separators are
        not accepted.
        """
        if isinstance(value, Fraction):
            return value
        if isinstance(value, str):
            parts = value.strip().split('/')
            if len(parts) == 1:
                return Fraction(int(parts[0]))
            if len(parts) == 2:
                return Fraction(int(parts[0]), int(parts[1]))
            raise ValueError(f"Invalid fraction format: {value}")
        return Fraction.from_int(value)

    def to_double(self) -> float:
        """Approximate value as float, for display and diagnostics only"""
        return self._numerator / self._denominator

    def __float__(self) -> float:
        return self.to_double()

    # Arithmetic
    def add(self, other: 'Fraction') -> 'Fraction':
        """Return self + other"""
        other = _coerce(other)
        return Fraction(self._numerator * other._denominator + other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def subtract(self, other: 'Fraction') -> 'Fraction':
        """Return self - other"""
        other = _coerce(other)
        return Fraction(self._numerator * other._denominator - other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def multiply(self, other: 'Fraction') -> 'Fraction':
        """Return self * other"""
        other = _coerce(other)
        return Fraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: 'Fraction') -> 'Fraction':
        """
        Return self / other.

        Raises:
            ZeroDivisionError: If other is zero, since the new denominator
                becomes zero before normalization
        """
        other = _coerce(other)
        return Fraction(self._numerator * other._denominator, self._denominator * other._numerator)

    def negate(self) -> 'Fraction':
        """Return -self"""
        return Fraction(-self._numerator, self._denominator)

    def invert(self) -> 'Fraction':
        """Return the multiplicative inverse 1/self"""
        return Fraction(self._denominator, self._numerator)

    def abs(self) -> 'Fraction':
        """Return absolute value"""
        return Fraction(abs(self._numerator), self._denominator)

    # Predicates
    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator < 0:
            return -1
        elif self._numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    # Comparison
    def compare_to(self, other: 'Fraction') -> int:
        """Compare to another Fraction: -1 if less, 0 if equal, 1 if greater"""
        other = _coerce(other)
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        if lhs < rhs:
            return -1
        elif lhs > rhs:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        other = _coerce_or_none(other)
        if other is None:
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __lt__(self, other) -> bool:
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # integral fractions compare equal to ints, so they must hash alike
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    # Python operator overloading
    def __add__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return _coerce(other).add(self)

    def __sub__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return _coerce(other).multiply(self)

    def __truediv__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if _coerce_or_none(other) is None:
            return NotImplemented
        return _coerce(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    # String representation
    def __format__(self, format_spec: str) -> str:
        """
        Format numerator and denominator separately with format_spec.

        An empty format_spec groups thousands: with the separator of the
        current LC_NUMERIC locale when it defines one, with commas otherwise.
        """
        spec = format_spec or _default_grouping()
        if self._denominator == 1:
            return format(self._numerator, spec)
        return f"{self._numerator:{spec}}/{self._denominator:{spec}}"

    def __str__(self) -> str:
        return format(self, '')

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


def _coerce_or_none(value):
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Integral):
        return Fraction.from_int(value)
    return None


def _coerce(value) -> Fraction:
    result = _coerce_or_none(value)
    if result is None:
        raise TypeError(f"Cannot use {type(value).__name__} as Fraction operand")
    return result


def _default_grouping() -> str:
    """'n' when the current locale defines a thousands separator, ',' otherwise"""
    return 'n' if locale.localeconv()['thousands_sep'] else ','


# Constants
Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)
Fraction.MINUS_ONE = Fraction(-1, 1)

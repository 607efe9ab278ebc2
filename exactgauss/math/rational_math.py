"""
Conversions between exactgauss Fractions and other rational number types.

Elimination itself only ever sees exactgauss Fractions. This module converts
values coming from Python's fractions module, sympy, numpy arrays or plain
strings on the way in, and hands out fractions.Fraction or sympy.Rational
values on the way out.
"""

import numbers
from fractions import Fraction as PyFraction
from typing import Union

from sympy import Rational

from .fraction import Fraction

# Type alias for values that can be converted to Fraction
Numeric = Union[int, float, str, Fraction, PyFraction, Rational]


def to_fraction(value: Numeric) -> Fraction:
    """
    Convert a numeric value to an exactgauss Fraction.

    Floats are approximated with fractions.Fraction.limit_denominator(), so
    0.1 becomes 1/10 rather than its exact binary expansion.

    Args:
        value: An int, numpy integer or float, fractions.Fraction,
            sympy.Rational, "num/den" string or Fraction

    Returns:
        Fraction representation of the value

    Raises:
        TypeError: If the value type is not supported
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, numbers.Integral):
        return Fraction.from_int(int(value))
    if isinstance(value, PyFraction):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        approx = PyFraction(float(value)).limit_denominator()
        return Fraction(approx.numerator, approx.denominator)
    if isinstance(value, str):
        return Fraction.value_of(value)
    raise TypeError(f"Cannot convert {type(value)} to Fraction")


def to_python_fraction(value: Fraction) -> PyFraction:
    """Convert to fractions.Fraction"""
    value = to_fraction(value)
    return PyFraction(value.numerator, value.denominator)


def to_sympy_rational(value: Fraction) -> Rational:
    """Convert to sympy.Rational"""
    value = to_fraction(value)
    return Rational(value.numerator, value.denominator)

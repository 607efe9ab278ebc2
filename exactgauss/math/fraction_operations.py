"""
Named operations on Fraction instances.

The class serves as the number-operations provider a matrix hands out through
get_number_operations(), following a singleton pattern. The same operations are
exported as module-level free functions for callers that prefer
add(a, b) over a + b.
"""

from typing import List, Union
from .fraction import Fraction


class FractionOperations:
    """
    Provides factory methods and operations for Fraction instances.
    """

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super(FractionOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'FractionOperations':
        """Returns the singleton instance."""
        return cls()

    def number_class(self) -> type:
        """Return the Fraction class"""
        return Fraction

    def new_array(self, size: int) -> List[Fraction]:
        """Create a zero-filled Fraction list of given size"""
        return [Fraction.ZERO] * size

    # Factory methods
    def value_of(self, value: Union[int, str, Fraction]) -> Fraction:
        return Fraction.value_of(value)

    def zero(self) -> Fraction:
        return Fraction.ZERO

    def one(self) -> Fraction:
        return Fraction.ONE

    # Arithmetic operations - delegate to Fraction methods
    def add(self, num_a: Fraction, num_b: Fraction) -> Fraction:
        return Fraction.value_of(num_a).add(num_b)

    def subtract(self, num_a: Fraction, num_b: Fraction) -> Fraction:
        return Fraction.value_of(num_a).subtract(num_b)

    def multiply(self, num_a: Fraction, num_b: Fraction) -> Fraction:
        return Fraction.value_of(num_a).multiply(num_b)

    def divide(self, num_a: Fraction, num_b: Fraction) -> Fraction:
        """Divide num_a by num_b, raising ZeroDivisionError for a zero divisor"""
        return Fraction.value_of(num_a).divide(num_b)

    def negate(self, number: Fraction) -> Fraction:
        return Fraction.value_of(number).negate()

    def invert(self, number: Fraction) -> Fraction:
        """Return the multiplicative inverse, raising ZeroDivisionError for zero"""
        return Fraction.value_of(number).invert()

    # Comparison operations
    def compare(self, o1: Fraction, o2: Fraction) -> int:
        """Compare two Fractions: -1, 0 or 1"""
        return Fraction.value_of(o1).compare_to(o2)

    def equal(self, o1: Fraction, o2: Fraction) -> bool:
        return Fraction.value_of(o1) == Fraction.value_of(o2)

    def less(self, o1: Fraction, o2: Fraction) -> bool:
        return self.compare(o1, o2) < 0

    def signum(self, number: Fraction) -> int:
        return Fraction.value_of(number).signum()

    # Predicates
    def is_zero(self, number: Fraction) -> bool:
        return Fraction.value_of(number).is_zero()

    def is_one(self, number: Fraction) -> bool:
        return Fraction.value_of(number).is_one()


# Create singleton instance
INSTANCE = FractionOperations.instance()

value_of = INSTANCE.value_of
zero = INSTANCE.zero
one = INSTANCE.one
add = INSTANCE.add
subtract = INSTANCE.subtract
multiply = INSTANCE.multiply
divide = INSTANCE.divide
negate = INSTANCE.negate
invert = INSTANCE.invert
compare = INSTANCE.compare
equal = INSTANCE.equal
less = INSTANCE.less
is_zero = INSTANCE.is_zero

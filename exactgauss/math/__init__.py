"""
Mathematical Infrastructure Module

This module provides the mathematical foundation for exact Gaussian elimination:
- Exact rational arithmetic with Fraction
- Augmented matrices holding Fraction values
- Gauss-Jordan row reduction with column-completion notifications

All operations maintain exact precision using rational arithmetic.
"""

from .fraction import Fraction
from .fraction_operations import FractionOperations
from .readable_matrix import ReadableMatrix, WritableMatrix
from .augmented_matrix import AugmentedMatrix, ColumnObserver
from .gauss import Gauss as GaussianElimination
from .rational_math import to_fraction, to_python_fraction, to_sympy_rational

__all__ = [
    'Fraction',
    'FractionOperations',
    'ReadableMatrix',
    'WritableMatrix',
    'AugmentedMatrix',
    'ColumnObserver',
    'GaussianElimination',
    'to_fraction',
    'to_python_fraction',
    'to_sympy_rational',
]

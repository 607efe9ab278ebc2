"""
AugmentedMatrix - the grid of a linear system together with its right-hand side.

A matrix with `rows` equations and `variables` unknowns has `variables + 1`
columns, the last one holding the right-hand side. Values are stored as two
flat arrays (numerators, denominators) in row-major order, so the cell at
(row, col) lives at index row * columns + col.

The matrix is reduced in place by eliminate(). Column-completion observers
registered beforehand are called synchronously after each pivoted column.
"""

import numbers
import operator
from typing import Callable, Iterator, List, Sequence

import numpy as np
import sympy
from scipy import sparse

from .fraction import Fraction
from .fraction_operations import FractionOperations
from .gauss import Gauss
from .rational_math import Numeric, to_fraction, to_sympy_rational
from .readable_matrix import ReadableMatrix, WritableMatrix

ColumnObserver = Callable[[int], None]


class AugmentedMatrix(WritableMatrix):
    """
    Augmented matrix of Fraction values with Gauss-Jordan elimination.
    """

    def __init__(self, *args):
        """
        Initialize matrix with various input types.

        Supported signatures:
        - AugmentedMatrix(size) - zero matrix with size equations and size variables
        - AugmentedMatrix(equations, variables) - zero matrix
        - AugmentedMatrix(grid) - from a list of equal-length rows, last entry
          of each row being the right-hand side
        - AugmentedMatrix(readable_matrix) - copy constructor
        """
        self._column_observers: List[ColumnObserver] = []
        if len(args) == 1 and isinstance(args[0], numbers.Integral):
            size = operator.index(args[0])
            self._init_zero_matrix(size, size + 1)
        elif len(args) == 2 and all(isinstance(arg, numbers.Integral) for arg in args):
            equations, variables = operator.index(args[0]), operator.index(args[1])
            if variables < 0:
                raise ValueError(f"negative variable count: {variables}")
            self._init_zero_matrix(equations, variables + 1)
        elif len(args) == 1 and isinstance(args[0], ReadableMatrix):
            self._init_from_readable_matrix(args[0])
        elif len(args) == 1 and isinstance(args[0], (list, tuple)):
            self._init_from_grid(args[0])
        else:
            raise ValueError(f"Invalid constructor arguments: {args}")

    def _init_zero_matrix(self, row_count: int, col_count: int):
        """Initialize as zero matrix with given dimensions"""
        if row_count < 0:
            raise ValueError(f"negative row count: {row_count}")
        if col_count < 1:
            raise ValueError(f"matrix needs at least the right-hand side column, got {col_count} columns")

        vals = row_count * col_count
        self._row_count = row_count
        self._column_count = col_count
        self._numerators = [0] * vals
        self._denominators = [1] * vals

    def _init_from_readable_matrix(self, mx: ReadableMatrix):
        self._init_zero_matrix(mx.get_row_count(), mx.get_column_count())
        for row in range(mx.get_row_count()):
            for col in range(mx.get_column_count()):
                self.set_value_at(row, col, mx.get_value_at(row, col))

    def _init_from_grid(self, data: Sequence[Sequence[Numeric]]):
        rows = len(data)
        if rows == 0:
            self._init_zero_matrix(0, 1)
            return

        cols = len(data[0])
        for row_data in data:
            if len(row_data) != cols:
                raise ValueError("inconsistent row width")
        self._init_zero_matrix(rows, cols)

        for row in range(rows):
            for col in range(cols):
                self.set_value_at(row, col, data[row][col])

    # Alternative constructors
    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'AugmentedMatrix':
        """
        Create an AugmentedMatrix from a 2D numpy array.

        Integer arrays convert exactly; float entries are approximated by the
        closest fraction with a small denominator (see to_fraction).
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2D array, got {array.ndim} dimensions")
        if array.shape[0] == 0:
            return cls(0, array.shape[1] - 1)
        return cls(array.tolist())

    @classmethod
    def from_sympy(cls, matrix: sympy.MatrixBase) -> 'AugmentedMatrix':
        """Create an AugmentedMatrix from a sympy Matrix of rational entries"""
        if matrix.rows == 0:
            return cls(0, matrix.cols - 1)
        return cls(matrix.tolist())

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix) -> 'AugmentedMatrix':
        """
        Create an AugmentedMatrix from a scipy sparse matrix.

        Only the stored entries are visited; everything else stays zero.
        """
        rows, cols = sparse_matrix.shape
        matrix = cls(rows, cols - 1)
        coo = sparse.coo_matrix(sparse_matrix)
        for row, col, value in zip(coo.row, coo.col, coo.data):
            matrix.set_value_at(int(row), int(col), matrix.get_value_at(int(row), int(col)) + to_fraction(value))
        return matrix

    # Dimensions
    def get_number_operations(self) -> FractionOperations:
        return FractionOperations.instance()

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def get_variable_count(self) -> int:
        """Number of unknowns, i.e. all columns but the right-hand side"""
        return self._column_count - 1

    @property
    def rows(self) -> int:
        return self._row_count

    @property
    def equations(self) -> int:
        return self._row_count

    @property
    def columns(self) -> int:
        return self._column_count

    @property
    def variables(self) -> int:
        return self._column_count - 1

    # Cell access
    def get_value_at(self, row: int, col: int) -> Fraction:
        index = row * self._column_count + col
        return Fraction(self._numerators[index], self._denominators[index])

    def get_signum_at(self, row: int, col: int) -> int:
        num = self._numerators[row * self._column_count + col]
        return 0 if num == 0 else (1 if num > 0 else -1)

    def set_value_at(self, row: int, col: int, value: Numeric) -> None:
        """Set value at specified position, converting ints and other rationals"""
        value = to_fraction(value)
        index = row * self._column_count + col
        self._numerators[index] = value.numerator
        self._denominators[index] = value.denominator

    def __getitem__(self, key) -> Fraction:
        row, col = key
        return self.get_value_at(row, col)

    def __setitem__(self, key, value: Numeric) -> None:
        row, col = key
        self.set_value_at(row, col, value)

    # Row operations
    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Swap two rows"""
        if row_a == row_b:
            return

        cols = self._column_count
        for col in range(cols):
            idx_a = row_a * cols + col
            idx_b = row_b * cols + col
            self._numerators[idx_a], self._numerators[idx_b] = self._numerators[idx_b], self._numerators[idx_a]
            self._denominators[idx_a], self._denominators[idx_b] = self._denominators[idx_b], self._denominators[idx_a]

    def scale_row(self, row: int, factor: Fraction) -> None:
        """Multiply entire row by factor"""
        factor = to_fraction(factor)
        for col in range(self._column_count):
            self.set_value_at(row, col, self.get_value_at(row, col) * factor)

    def add_scaled_row(self, dst_row: int, factor: Fraction, src_row: int) -> None:
        """Add source row (multiplied by factor) to destination row"""
        factor = to_fraction(factor)
        if factor.is_zero():
            return
        for col in range(self._column_count):
            result = self.get_value_at(dst_row, col) + factor * self.get_value_at(src_row, col)
            self.set_value_at(dst_row, col, result)

    # Elimination
    def add_column_observer(self, observer: ColumnObserver) -> None:
        """
        Register a callback invoked with the index of every pivoted column.

        Observers run synchronously, in registration order, after the row
        operations of the column are complete. An exception raised by an
        observer propagates out of eliminate() and stops the elimination.
        """
        self._column_observers.append(observer)

    def remove_column_observer(self, observer: ColumnObserver) -> None:
        self._column_observers.remove(observer)

    def iter_eliminate(self) -> Iterator[int]:
        """
        Eliminate column by column, yielding every pivoted column index.

        Observers are notified before the index is yielded. Leaving the loop
        early leaves the matrix partially reduced.
        """
        for col in Gauss.get_instance().row_echelon(self):
            for observer in list(self._column_observers):
                observer(col)
            yield col

    def eliminate(self) -> None:
        """Run the Gauss-Jordan elimination in place"""
        for _ in self.iter_eliminate():
            pass

    # Conversions
    def clone(self) -> 'AugmentedMatrix':
        """Create deep copy of the values; observers are not copied"""
        return AugmentedMatrix(self)

    def get_double_value_at(self, row: int, col: int) -> float:
        return self.get_value_at(row, col).to_double()

    def get_double_rows(self) -> List[List[float]]:
        """Get all rows as 2D list of approximate floats"""
        return [[self.get_double_value_at(row, col) for col in range(self._column_count)]
                for row in range(self._row_count)]

    def to_numpy(self) -> np.ndarray:
        """Approximate float64 copy of the matrix, for display and plotting"""
        return np.array(self.get_double_rows(), dtype=float).reshape(self._row_count, self._column_count)

    def to_sympy(self) -> sympy.Matrix:
        """Exact copy as a sympy Matrix of Rational entries"""
        values = [to_sympy_rational(value) for row in self.get_number_rows() for value in row]
        return sympy.Matrix(self._row_count, self._column_count, values)

    # String representation
    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", ",", "", "", ", ")

    def __repr__(self) -> str:
        return f"AugmentedMatrix({self.get_number_rows()!r})"

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", "", " ", " ", ",")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str,
                          row_postfix: str, row_separator: str, col_prefix: str,
                          col_postfix: str, col_separator: str) -> str:
        result = [prefix]

        for row in range(self._row_count):
            if row > 0:
                result.append(row_separator)
            result.append(row_prefix)

            for col in range(self._column_count):
                if col > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(self.get_value_at(row, col)))
                result.append(col_postfix)

            result.append(row_postfix)

        result.append(postfix)
        return ''.join(result)

    def to_table_string(self) -> str:
        """
        Render the matrix as an aligned table.

        All cells are right-aligned to the widest cell and separated by two
        spaces; the right-hand side column is set off by "| ". Example for
        [[3, 2, -3], [-2, 8, 4]]:

            ---          ---
            |  3   2  | -3 |
            | -2   8  |  4 |
            ---          ---
        """
        cells = [[str(value) for value in row] for row in self.get_number_rows()]
        width = max((len(cell) for row in cells for cell in row), default=0)
        border = "---" + " " * ((width + 2) * self._column_count - 2) + "---"

        lines = [border]
        for row in cells:
            parts = [("| " if col == self.variables else "") + cell.rjust(width) for col, cell in enumerate(row)]
            lines.append("| " + "  ".join(parts) + " |")
        lines.append(border)
        return "\n".join(lines)

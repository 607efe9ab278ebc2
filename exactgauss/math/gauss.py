"""
Gauss-Jordan row reduction with exact rational arithmetic.

The engine walks the coefficient columns of an augmented matrix (every column
except the last, right-hand side one) and keeps the pivot row tied to the
column index: column rc is always pivoted in row rc. A column is skipped when
it is zero in every row, or when neither row rc nor any row below it holds a
non-zero entry. Skipped rows are never realigned afterwards, so rank-deficient
systems can end up less reduced than a textbook RREF.
"""

import logging
from typing import Iterator

from .readable_matrix import WritableMatrix

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Row reduction engine operating in place on a WritableMatrix.
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Get the shared engine instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def row_echelon(self, matrix: WritableMatrix) -> Iterator[int]:
        """
        Reduce the augmented matrix to reduced row echelon form.

        This is a generator: each coefficient column that received a pivot is
        yielded once its row operations are complete, in ascending order. The
        matrix is only modified while the generator is being advanced, so a
        caller that stops iterating stops the elimination between columns.

        Args:
            matrix: Augmented matrix, last column holding the right-hand side

        Yields:
            Index of every pivoted column
        """
        rows = matrix.get_row_count()
        variables = matrix.get_column_count() - 1
        ops = matrix.get_number_operations()

        for rc in range(min(variables, rows)):
            if self._is_zero_column(matrix, rc):
                LOG.debug(f"Column {rc} is zero in every row, skipping.")
                continue

            if ops.is_zero(matrix.get_value_at(rc, rc)):
                pivot_row = self._find_pivot_row(matrix, rc + 1, rc)
                if pivot_row == -1:
                    LOG.debug(f"No pivot for column {rc} in rows {rc}..{rows - 1}, skipping.")
                    continue
                LOG.debug(f"Swapping rows {rc} and {pivot_row}.")
                matrix.swap_rows(rc, pivot_row)

            matrix.scale_row(rc, ops.invert(matrix.get_value_at(rc, rc)))

            for row in range(rows):
                if row == rc:
                    continue
                factor = ops.negate(matrix.get_value_at(row, rc))
                matrix.add_scaled_row(row, factor, rc)

            LOG.debug(f"Column {rc} eliminated.")
            yield rc

    def eliminate(self, matrix: WritableMatrix) -> int:
        """
        Run the complete reduction without observing single columns.

        Returns:
            Number of pivoted columns
        """
        return sum(1 for _ in self.row_echelon(matrix))

    def _is_zero_column(self, matrix: WritableMatrix, col: int) -> bool:
        """Check whether col is zero in every row"""
        return all(matrix.get_signum_at(row, col) == 0 for row in range(matrix.get_row_count()))

    def _find_pivot_row(self, matrix: WritableMatrix, start_row: int, col: int) -> int:
        """
        Find the first row at or below start_row with a non-zero entry in col.

        Returns:
            Row index of the pivot, or -1 if no suitable pivot found
        """
        for row in range(start_row, matrix.get_row_count()):
            if matrix.get_signum_at(row, col) != 0:
                return row
        return -1

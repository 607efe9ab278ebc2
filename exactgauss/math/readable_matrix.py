"""
Matrix interfaces used by the elimination engine.

ReadableMatrix exposes dimensions and cell values, WritableMatrix adds cell
assignment and the three elementary row operations Gaussian elimination is
built from. Gauss only relies on these two interfaces.
"""

from abc import ABC, abstractmethod
from typing import List

from .fraction import Fraction


class ReadableMatrix(ABC):
    """
    Base interface for matrices of Fraction values. Data can be read, but not
    written to, through this interface.
    """

    @abstractmethod
    def get_row_count(self) -> int:
        """Get number of rows in the matrix"""
        pass

    @abstractmethod
    def get_column_count(self) -> int:
        """Get number of columns in the matrix"""
        pass

    @abstractmethod
    def get_value_at(self, row: int, col: int) -> Fraction:
        """Get the value at the specified position"""
        pass

    @abstractmethod
    def get_number_operations(self):
        """Get the FractionOperations instance for this matrix's number type"""
        pass

    @abstractmethod
    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        pass

    def get_signum_at(self, row: int, col: int) -> int:
        """Get the sign (-1, 0, 1) of the value at the specified position"""
        return self.get_value_at(row, col).signum()

    def get_number_rows(self) -> List[List[Fraction]]:
        """Get all rows as a 2D list of Fractions"""
        return [[self.get_value_at(row, col) for col in range(self.get_column_count())]
                for row in range(self.get_row_count())]


class WritableMatrix(ReadableMatrix):
    """
    Readable matrix that also supports assignment and elementary row operations.
    """

    @abstractmethod
    def set_value_at(self, row: int, col: int, value: Fraction) -> None:
        """Set the value at the specified position"""
        pass

    @abstractmethod
    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Exchange all column values of two rows"""
        pass

    @abstractmethod
    def scale_row(self, row: int, factor: Fraction) -> None:
        """Multiply every cell in row by factor"""
        pass

    @abstractmethod
    def add_scaled_row(self, dst_row: int, factor: Fraction, src_row: int) -> None:
        """Add factor * src_row[c] to dst_row[c] for every column c"""
        pass

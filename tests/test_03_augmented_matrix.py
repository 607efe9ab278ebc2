"""AugmentedMatrix storage, row operations, conversions and rendering."""
import locale

import numpy as np
import pytest
import sympy
from scipy import sparse

from exactgauss import AugmentedMatrix, Fraction

# =============================================================================
# Construction
# =============================================================================


def test_zero_matrix_dimensions():
    m = AugmentedMatrix(3, 4)
    assert (m.rows, m.equations, m.columns, m.variables) == (3, 3, 5, 4)
    assert m.get_row_count() == 3
    assert m.get_column_count() == 5
    assert m.get_variable_count() == 4
    assert all(value == Fraction.ZERO for row in m.get_number_rows() for value in row)


def test_square_shorthand():
    m = AugmentedMatrix(2)
    assert (m.rows, m.variables, m.columns) == (2, 2, 3)


def test_grid_constructor_converts_values():
    m = AugmentedMatrix([[1, Fraction(1, 2), "3/4"], [0, -2, 5]])
    assert (m.rows, m.variables) == (2, 2)
    assert m[0, 1] == Fraction(1, 2)
    assert m[0, 2] == Fraction(3, 4)
    assert m[1, 1] == Fraction(-2)


def test_invalid_construction():
    with pytest.raises(ValueError):
        AugmentedMatrix(-1, 2)
    with pytest.raises(ValueError):
        AugmentedMatrix(2, -1)
    with pytest.raises(ValueError):
        AugmentedMatrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        AugmentedMatrix([[], []])
    with pytest.raises(ValueError):
        AugmentedMatrix(1.5)


def test_numpy_integer_sizes():
    m = AugmentedMatrix(np.int64(3))
    assert (m.rows, m.variables) == (3, 3)
    m = AugmentedMatrix(np.int32(2), np.int64(4))
    assert (m.rows, m.variables, m.columns) == (2, 4, 5)
    assert all(value.is_zero() for row in m.get_number_rows() for value in row)


def test_empty_grid():
    m = AugmentedMatrix([])
    assert (m.rows, m.columns, m.variables) == (0, 1, 0)


def test_copy_constructor_and_clone_are_independent():
    original = AugmentedMatrix([[1, 2, 3], [4, 5, 6]])
    for copy in (AugmentedMatrix(original), original.clone()):
        copy[0, 0] = 9
        assert original[0, 0] == 1
        assert copy.get_number_rows()[1] == original.get_number_rows()[1]


# =============================================================================
# Cell access and row operations
# =============================================================================


def test_cell_access():
    m = AugmentedMatrix(2, 2)
    m.set_value_at(1, 2, Fraction(7, 3))
    m[0, 1] = -4
    assert m.get_value_at(1, 2) == Fraction(7, 3)
    assert m[0, 1] == Fraction(-4)
    assert m.get_signum_at(0, 1) == -1
    assert m.get_signum_at(0, 0) == 0
    assert m.get_double_value_at(1, 2) == pytest.approx(7 / 3)


def test_swap_rows():
    m = AugmentedMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    m.swap_rows(0, 2)
    assert m.get_number_rows() == [[7, 8, 9], [4, 5, 6], [1, 2, 3]]
    m.swap_rows(1, 1)
    assert m.get_number_rows()[1] == [4, 5, 6]


def test_scale_row():
    m = AugmentedMatrix([[2, 4, 6], [1, 1, 1]])
    m.scale_row(0, Fraction(1, 2))
    assert m.get_number_rows() == [[1, 2, 3], [1, 1, 1]]
    m.scale_row(1, Fraction(-2, 3))
    assert m.get_number_rows()[1] == [Fraction(-2, 3)] * 3


def test_add_scaled_row():
    m = AugmentedMatrix([[1, 2, 3], [2, 1, 0]])
    m.add_scaled_row(1, Fraction(-2), 0)
    assert m.get_number_rows() == [[1, 2, 3], [0, -3, -6]]
    m.add_scaled_row(0, Fraction(2, 3), 1)
    assert m.get_number_rows()[0] == [1, 0, -1]


# =============================================================================
# Conversions
# =============================================================================


def test_numpy_round_trip():
    array = np.array([[1, 2, 3], [4, 5, 6]])
    m = AugmentedMatrix.from_numpy(array)
    assert m[1, 2] == Fraction(6)
    m[0, 0] = Fraction(1, 4)
    result = m.to_numpy()
    assert result.shape == (2, 3)
    assert result.dtype == np.float64
    assert result[0, 0] == 0.25


def test_from_numpy_with_floats_and_empty_rows():
    m = AugmentedMatrix.from_numpy(np.array([[0.5, 0.25]]))
    assert m.get_number_rows() == [[Fraction(1, 2), Fraction(1, 4)]]
    empty = AugmentedMatrix.from_numpy(np.zeros((0, 4)))
    assert (empty.rows, empty.variables) == (0, 3)
    with pytest.raises(ValueError):
        AugmentedMatrix.from_numpy(np.zeros(3))


def test_sympy_round_trip():
    source = sympy.Matrix([[sympy.Rational(1, 2), 3], [-1, sympy.Rational(5, 7)]])
    m = AugmentedMatrix.from_sympy(source)
    assert m[1, 1] == Fraction(5, 7)
    assert m.to_sympy() == source


def test_from_sparse():
    source = sparse.csr_matrix(np.array([[1, 0, 2], [0, 3, 0]]))
    m = AugmentedMatrix.from_sparse(source)
    assert (m.rows, m.columns) == (2, 3)
    assert m.get_number_rows() == [[1, 0, 2], [0, 3, 0]]


# =============================================================================
# Rendering
# =============================================================================


def test_single_line_string():
    m = AugmentedMatrix([[1, Fraction(1, 2)], [3, 4]])
    assert str(m) == "{ [1, 1/2], [3, 4] }"


def test_multiline_string():
    m = AugmentedMatrix([[1, 2]])
    assert m.to_multiline_string() == "{\n [ 1 , 2 ]\n}\n"


def test_table_string():
    m = AugmentedMatrix([[3, 2, -3], [-2, 8, 4]])
    expected = "\n".join([
        "---          ---",
        "|  3   2  | -3 |",
        "| -2   8  |  4 |",
        "---          ---",
    ])
    assert m.to_table_string() == expected


def test_table_string_with_fractions():
    m = AugmentedMatrix([[1, Fraction(-8, 7)]])
    assert m.to_table_string().splitlines()[1] == "|    1  | -8/7 |"


def test_table_string_groups_thousands(monkeypatch):
    monkeypatch.setattr(locale, "localeconv", lambda: {"thousands_sep": ""})
    m = AugmentedMatrix([[1234, 1]])
    assert m.to_table_string().splitlines()[1] == "| 1,234  |     1 |"

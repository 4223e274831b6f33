"""
Tests for the immutable augmented Matrix
"""

import dataclasses

import pytest

from rref_puzzle.core.domain.matrix import MAX_SIZE, MIN_SIZE, Matrix, validate_size
from rref_puzzle.core.math.rational import Rational


class TestMatrixConstruction:
    """Shape validation and value coercion"""

    def test_from_ints(self) -> None:
        m = Matrix.from_values([[1, 2, 3, 4], [5, 6, 7, 8], [9, 0, 1, 2]])
        assert m.size == 3
        assert m.width == 4
        assert m.cell(1, 2) == Rational(7)
        assert all(isinstance(v, Rational) for row in m for v in row)

    def test_from_fraction_text(self) -> None:
        m = Matrix.from_values([["1/2", 0, 0, "-3"], [0, 1, 0, "0.5"], [0, 0, 1, 0]])
        assert m.cell(0, 0) == Rational(1, 2)
        assert m.augmented(1) == Rational(1, 2)

    def test_lists_are_stored_as_tuples(self) -> None:
        m = Matrix([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]])  # type: ignore[arg-type]
        assert isinstance(m.rows, tuple)
        assert all(isinstance(row, tuple) for row in m.rows)

    @pytest.mark.parametrize("size", [1, 2, 6])
    def test_unsupported_size(self, size: int) -> None:
        rows = [[0] * (size + 1) for _ in range(size)]
        with pytest.raises(ValueError, match="size must be in"):
            Matrix.from_values(rows)

    def test_wrong_row_length(self) -> None:
        with pytest.raises(ValueError, match="Row 1 has 3 entries"):
            Matrix.from_values([[1, 0, 0, 1], [0, 1, 0], [0, 0, 1, 1]])

    def test_frozen(self) -> None:
        m = Matrix.identity(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.rows = ()  # type: ignore[misc]

    def test_equality(self) -> None:
        a = Matrix.from_values([[2, 0, 0, 4], [0, 1, 0, 3], [0, 0, 1, 5]])
        b = Matrix.from_values([["4/2", 0, 0, 4], [0, 1, 0, 3], [0, 0, 1, 5]])
        assert a == b

    def test_validate_size(self) -> None:
        for size in range(MIN_SIZE, MAX_SIZE + 1):
            validate_size(size)
        with pytest.raises(ValueError):
            validate_size(True)  # type: ignore[arg-type]


class TestMatrixIdentity:
    """identity() helper"""

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_identity_block(self, size: int) -> None:
        m = Matrix.identity(size, list(range(size)))
        for i in range(size):
            for j in range(size):
                assert m.cell(i, j) == (1 if i == j else 0)
            assert m.augmented(i) == i

    def test_default_augmented_column_is_zero(self) -> None:
        m = Matrix.identity(4)
        assert all(m.augmented(i).is_zero() for i in range(4))

    def test_wrong_augmented_length(self) -> None:
        with pytest.raises(ValueError, match="augmented_column"):
            Matrix.identity(3, [1, 2])


class TestMatrixDerivation:
    """with_row / with_rows_swapped never mutate the source"""

    def test_with_row(self, scenario_matrix: Matrix) -> None:
        new = scenario_matrix.with_row(0, [Rational(1), Rational(0), Rational(0), Rational(2)])
        assert new.row(0) == (1, 0, 0, 2)
        assert scenario_matrix.row(0) == (2, 0, 0, 4)
        assert new is not scenario_matrix

    def test_with_rows_swapped(self, scenario_matrix: Matrix) -> None:
        new = scenario_matrix.with_rows_swapped(0, 2)
        assert new.row(0) == scenario_matrix.row(2)
        assert new.row(2) == scenario_matrix.row(0)
        assert new.row(1) == scenario_matrix.row(1)

    def test_to_lists_is_independent(self, scenario_matrix: Matrix) -> None:
        lists = scenario_matrix.to_lists()
        lists[0][0] = Rational(99)
        assert scenario_matrix.cell(0, 0) == 2

    def test_has_row(self, scenario_matrix: Matrix) -> None:
        assert scenario_matrix.has_row(0)
        assert scenario_matrix.has_row(2)
        assert not scenario_matrix.has_row(3)
        assert not scenario_matrix.has_row(-1)
        assert not scenario_matrix.has_row(True)  # type: ignore[arg-type]

    def test_coefficients_exclude_augmented(self, scenario_matrix: Matrix) -> None:
        assert scenario_matrix.coefficients(0) == (2, 0, 0)
        assert scenario_matrix.augmented(0) == 4


class TestMatrixDisplay:
    """formatted() and str()"""

    def test_formatted(self) -> None:
        m = Matrix.from_values([["1/2", 0, 0, -3], [0, 1, 0, "1/3"], [0, 0, 1, 0]])
        assert m.formatted()[0] == ["1/2", "0", "0", "-3"]
        assert m.formatted()[1][3] == "1/3"

    def test_str_marks_augmented_column(self, scenario_matrix: Matrix) -> None:
        assert str(scenario_matrix).splitlines()[0] == "2 0 0 | 4"

"""
Tests for the RREF Completion Checker

Checks:
1. Identity with any augmented column is accepted
2. Unordered pivots, pivot != 1, non-zero above/below pivot are rejected
3. Zero rows must be trailing
4. Augmented column is never inspected
"""

import random

import pytest

from rref_puzzle.core.domain.matrix import Matrix
from rref_puzzle.core.math.rational import Rational
from rref_puzzle.engine.rref_checker import is_complete, is_rref, pivot_columns


class TestRREFAcceptance:
    """Matrices in reduced row echelon form"""

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_identity_with_any_augmented_column(self, size: int) -> None:
        rng = random.Random(size)
        for _ in range(20):
            rhs = [Rational(rng.randint(-50, 50), rng.randint(1, 20)) for _ in range(size)]
            assert is_rref(Matrix.identity(size, rhs))

    def test_trailing_zero_row(self) -> None:
        m = Matrix.from_values([[1, 0, 2, 3], [0, 1, -1, 4], [0, 0, 0, 7]])
        assert is_rref(m)

    def test_all_zero_coefficients(self) -> None:
        m = Matrix.from_values([[0, 0, 0, 1], [0, 0, 0, 2], [0, 0, 0, 3]])
        assert is_rref(m)

    def test_free_column_entries_allowed(self) -> None:
        """Non-pivot columns may hold anything"""
        m = Matrix.from_values(
            [[1, "2/3", 0, 0, 1], [0, 0, 1, 0, 2], [0, 0, 0, 1, 3], [0, 0, 0, 0, 0]]
        )
        assert is_rref(m)

    def test_is_complete_alias(self) -> None:
        assert is_complete is is_rref


class TestRREFRejection:
    """Violations of each RREF rule"""

    def test_unordered_pivots(self) -> None:
        """Row 0 pivot in column 1, row 1 pivot in column 0"""
        m = Matrix.from_values([[0, 1, 0, 1], [1, 0, 0, 2], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_pivot_not_one(self) -> None:
        """Identity with a diagonal 1 replaced by 2"""
        m = Matrix.from_values([[1, 0, 0, 1], [0, 2, 0, 2], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_negative_one_pivot(self) -> None:
        m = Matrix.from_values([[-1, 0, 0, 1], [0, 1, 0, 2], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_fractional_pivot(self) -> None:
        m = Matrix.from_values([["1/2", 0, 0, 1], [0, 1, 0, 2], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_non_zero_below_pivot(self) -> None:
        m = Matrix.from_values([[1, 0, 0, 1], [0, 1, 0, 2], [0, 1, 1, 3]])
        assert not is_rref(m)

    def test_non_zero_above_pivot(self) -> None:
        """Row echelon but not reduced"""
        m = Matrix.from_values([[1, 3, 0, 1], [0, 1, 0, 2], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_same_pivot_column_twice(self) -> None:
        m = Matrix.from_values([[1, 0, 0, 1], [1, 0, 0, 1], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_tiny_non_zero_is_not_zero(self) -> None:
        """Exact arithmetic: 1/10^12 is not treated as zero"""
        m = Matrix.from_values([[1, 0, 0, 1], [0, 1, 0, 2], [0, Rational(1, 10**12), 1, 3]])
        assert not is_rref(m)


class TestZeroRowOrdering:
    """Zero rows must come last"""

    def test_zero_row_above_non_zero_row(self) -> None:
        m = Matrix.from_values([[1, 0, 0, 1], [0, 0, 0, 5], [0, 0, 1, 3]])
        assert not is_rref(m)

    def test_same_rows_with_zero_row_last(self) -> None:
        m = Matrix.from_values([[1, 0, 0, 1], [0, 0, 1, 3], [0, 0, 0, 5]])
        assert is_rref(m)

    def test_augmented_column_ignored(self) -> None:
        """A row with only an augmented entry is still a zero row"""
        m = Matrix.from_values([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1]])
        assert is_rref(m)


class TestPivotColumns:
    """Leading column per row"""

    def test_pivots(self) -> None:
        m = Matrix.from_values([[0, 2, 0, 1], [0, 0, 0, 9], [3, 0, 0, 0]])
        assert pivot_columns(m) == (1, None, 0)

    def test_pure_function(self, scenario_matrix: Matrix) -> None:
        before = scenario_matrix.to_lists()
        is_rref(scenario_matrix)
        pivot_columns(scenario_matrix)
        assert scenario_matrix.to_lists() == before

"""
RREF Completion Checker

A matrix is complete when its coefficient block (columns [0, size)) is in
reduced row echelon form:
- each non-zero row's leading entry (pivot) equals exactly 1
- pivot columns strictly increase from row to row
- a pivot is the only non-zero entry of its column
- zero rows are trailing

The augmented column is free-form and never inspected. Entries are exact
Rationals, so the zero / one tests need no tolerance.
"""

from typing import Optional

from rref_puzzle.core.domain.matrix import Matrix


def pivot_columns(matrix: Matrix) -> tuple[Optional[int], ...]:
    """
    Leftmost non-zero coefficient column of every row.

    Returns:
        One entry per row; None for rows whose coefficients are all zero
    """
    pivots: list[Optional[int]] = []
    for i in range(matrix.size):
        pivot = None
        for j, value in enumerate(matrix.coefficients(i)):
            if not value.is_zero():
                pivot = j
                break
        pivots.append(pivot)
    return tuple(pivots)


def is_rref(matrix: Matrix) -> bool:
    """
    Check whether the matrix is in reduced row echelon form.

    Pure function; usable on any candidate matrix.

    Args:
        matrix: Matrix to check

    Returns:
        True if every row satisfies the RREF rules
    """
    last_pivot_col = -1
    in_zero_rows = False

    for i, pivot_col in enumerate(pivot_columns(matrix)):
        if pivot_col is None:
            in_zero_rows = True
            continue

        # Non-zero row below a zero row
        if in_zero_rows:
            return False

        if pivot_col <= last_pivot_col:
            return False

        if not matrix.cell(i, pivot_col).is_one():
            return False

        for k in range(matrix.size):
            if k != i and not matrix.cell(k, pivot_col).is_zero():
                return False

        last_pivot_col = pivot_col

    return True


# Name used by the game session API
is_complete = is_rref

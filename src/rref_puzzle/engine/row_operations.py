"""
Row Operation Engine — Swap / Scale / AddMultiple on an augmented matrix

apply_operation(matrix, operation) -> OperationOutcome(matrix, changed_cells)

CRITICAL INVARIANTS:
1. The input matrix is never mutated; a wholly new Matrix is returned
2. All-or-nothing: on OperationError nothing is produced
3. Swap reports every cell of both rows, even cells whose values coincide
4. Scale reports every cell of the scaled row (each entry was multiplied)
5. AddMultiple reports the target-row cells whose value differs exactly,
   so a zero factor reports nothing

Validation order: row indices, then row distinctness, then zero factor.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from rref_puzzle.core.domain.matrix import Matrix
from rref_puzzle.core.domain.operations import AddMultiple, ScaleRow, SwapRows

logger = logging.getLogger(__name__)

Cell = tuple[int, int]
ChangedCells = frozenset[Cell]


# =============================================================================
# ERRORS
# =============================================================================


class OperationErrorKind(str, Enum):
    """Why an operation was rejected."""

    ZERO_FACTOR = "ZERO_FACTOR"
    INVALID_ROW_INDEX = "INVALID_ROW_INDEX"
    SAME_ROW_REQUIRES_TWO = "SAME_ROW_REQUIRES_TWO"


class OperationError(ValueError):
    """
    Operation rejected; the matrix is left unchanged.

    ZERO_FACTOR is a player mistake (message shown as is). INVALID_ROW_INDEX
    and SAME_ROW_REQUIRES_TWO indicate a caller that ignored the operation
    constraints.
    """

    def __init__(self, kind: OperationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class OperationOutcome:
    """Result of a successfully applied operation."""

    matrix: Matrix
    changed_cells: ChangedCells


# =============================================================================
# CHANGE DETECTION
# =============================================================================


def changed_cells(old: Matrix, new: Matrix) -> ChangedCells:
    """
    Coordinates (row, column) whose exact value differs between two matrices.

    Raises:
        ValueError: matrices have different sizes
    """
    if old.size != new.size:
        raise ValueError(f"Cannot diff {old.size}x{old.width} against {new.size}x{new.width}")

    return frozenset(
        (i, j)
        for i in range(old.size)
        for j in range(old.width)
        if old.cell(i, j) != new.cell(i, j)
    )


def _row_cells(matrix: Matrix, row: int) -> ChangedCells:
    return frozenset((row, j) for j in range(matrix.width))


# =============================================================================
# VALIDATION
# =============================================================================


def _check_row(matrix: Matrix, index: int, name: str) -> None:
    if not matrix.has_row(index):
        raise OperationError(
            OperationErrorKind.INVALID_ROW_INDEX,
            f"{name}={index} out of range [0, {matrix.size})",
        )


def _check_distinct(first: int, second: int, what: str) -> None:
    if first == second:
        raise OperationError(
            OperationErrorKind.SAME_ROW_REQUIRES_TWO,
            f"{what} requires two different rows, got {first} twice",
        )


# =============================================================================
# APPLY
# =============================================================================


def _apply_swap(matrix: Matrix, op: SwapRows) -> OperationOutcome:
    _check_row(matrix, op.row_a, "row_a")
    _check_row(matrix, op.row_b, "row_b")
    _check_distinct(op.row_a, op.row_b, "Swap")

    new_matrix = matrix.with_rows_swapped(op.row_a, op.row_b)
    return OperationOutcome(
        matrix=new_matrix,
        changed_cells=_row_cells(matrix, op.row_a) | _row_cells(matrix, op.row_b),
    )


def _apply_scale(matrix: Matrix, op: ScaleRow) -> OperationOutcome:
    _check_row(matrix, op.row, "row")
    if op.factor.is_zero():
        raise OperationError(OperationErrorKind.ZERO_FACTOR, "Cannot multiply by zero!")

    new_row = [value * op.factor for value in matrix.row(op.row)]
    return OperationOutcome(
        matrix=matrix.with_row(op.row, new_row),
        changed_cells=_row_cells(matrix, op.row),
    )


def _apply_add_multiple(matrix: Matrix, op: AddMultiple) -> OperationOutcome:
    _check_row(matrix, op.target, "target")
    _check_row(matrix, op.source, "source")
    _check_distinct(op.target, op.source, "AddMultiple")

    source = matrix.row(op.source)
    new_row = [value + op.factor * source[j] for j, value in enumerate(matrix.row(op.target))]
    new_matrix = matrix.with_row(op.target, new_row)
    return OperationOutcome(matrix=new_matrix, changed_cells=changed_cells(matrix, new_matrix))


def apply_operation(
    matrix: Matrix,
    operation: Union[SwapRows, ScaleRow, AddMultiple],
) -> OperationOutcome:
    """
    Apply one elementary row operation.

    Args:
        matrix: Current matrix (not modified)
        operation: SwapRows, ScaleRow or AddMultiple

    Returns:
        OperationOutcome with the new matrix and the changed cells

    Raises:
        OperationError: invalid row index, same row twice, or zero scale factor
        TypeError: operation is not one of the three variants
    """
    try:
        if isinstance(operation, SwapRows):
            outcome = _apply_swap(matrix, operation)
        elif isinstance(operation, ScaleRow):
            outcome = _apply_scale(matrix, operation)
        elif isinstance(operation, AddMultiple):
            outcome = _apply_add_multiple(matrix, operation)
        else:
            raise TypeError(f"Unsupported operation type: {type(operation).__name__}")
    except OperationError as e:
        logger.debug("Rejected %s: %s (%s)", operation.describe(), e, e.kind.value)
        raise

    logger.debug(
        "Applied %s, %d cell(s) changed", operation.describe(), len(outcome.changed_cells)
    )
    return outcome

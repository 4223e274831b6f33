"""
Domain models and value objects.

Contains the augmented Matrix, the row Operation variant and the session
snapshot exposed to the presentation layer.
"""

from rref_puzzle.core.domain.matrix import (
    MAX_SIZE,
    MIN_SIZE,
    Matrix,
    validate_size,
)
from rref_puzzle.core.domain.operations import (
    AddMultiple,
    Operation,
    ScaleRow,
    SwapRows,
    operation_from_dict,
)
from rref_puzzle.core.domain.session_state import PuzzleState, SessionSnapshot

__all__ = [
    # Matrix
    "MIN_SIZE",
    "MAX_SIZE",
    "Matrix",
    "validate_size",
    # Operations
    "Operation",
    "SwapRows",
    "ScaleRow",
    "AddMultiple",
    "operation_from_dict",
    # Session state
    "PuzzleState",
    "SessionSnapshot",
]

"""
RREF Puzzle Engine
==================

Numeric core of a row-reduction puzzle game on small augmented matrices:
exact rational arithmetic, row operations with change detection, the RREF
completion test and a game session with scoring and level progression.

Quick start:
    from rref_puzzle import new_session, parse_rational, format_rational
    from rref_puzzle import ScaleRow

    session = new_session()
    result = session.apply_operation(ScaleRow(row=0, factor=parse_rational("1/2")))
    print(result.changed_cells, session.is_complete)
"""

__version__ = "0.1.0"

from rref_puzzle.core.domain import (
    MAX_SIZE,
    MIN_SIZE,
    AddMultiple,
    Matrix,
    Operation,
    PuzzleState,
    ScaleRow,
    SessionSnapshot,
    SwapRows,
)
from rref_puzzle.core.math import (
    ParseError,
    ParseErrorKind,
    Rational,
    format_rational,
    parse_rational,
)
from rref_puzzle.engine import (
    OperationError,
    OperationErrorKind,
    apply_operation,
    generate,
    is_complete,
    is_rref,
)
from rref_puzzle.game import (
    GameSession,
    GameSessionError,
    GameSessionErrorKind,
    new_session,
)

__all__ = [
    # Values
    "Rational",
    "Matrix",
    "MIN_SIZE",
    "MAX_SIZE",
    # Operations
    "Operation",
    "SwapRows",
    "ScaleRow",
    "AddMultiple",
    # Text
    "format_rational",
    "parse_rational",
    "ParseError",
    "ParseErrorKind",
    # Engine
    "generate",
    "apply_operation",
    "is_rref",
    "is_complete",
    "OperationError",
    "OperationErrorKind",
    # Session
    "GameSession",
    "GameSessionError",
    "GameSessionErrorKind",
    "PuzzleState",
    "SessionSnapshot",
    "new_session",
]

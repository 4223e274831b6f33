"""Matrix engine — generator, row operations and the RREF completion checker."""

from .generator import GeneratorConfig, IntegerSource, generate
from .row_operations import (
    Cell,
    ChangedCells,
    OperationError,
    OperationErrorKind,
    OperationOutcome,
    apply_operation,
    changed_cells,
)
from .rref_checker import is_complete, is_rref, pivot_columns

__all__ = [
    # Generator
    "GeneratorConfig",
    "IntegerSource",
    "generate",
    # Row operations
    "Cell",
    "ChangedCells",
    "OperationError",
    "OperationErrorKind",
    "OperationOutcome",
    "apply_operation",
    "changed_cells",
    # RREF checker
    "is_complete",
    "is_rref",
    "pivot_columns",
]

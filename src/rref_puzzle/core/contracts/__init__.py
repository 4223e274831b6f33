"""
Contract Validation Module

JSON Schema contracts between the puzzle core and its presentation layer.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    OperationRequestValidator,
    SchemaLoader,
    SessionSnapshotValidator,
    operation_from_request,
    snapshot_to_contract,
    validate_operation_request,
    validate_session_snapshot,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OperationRequestValidator",
    "SessionSnapshotValidator",
    # Functions
    "validate_operation_request",
    "validate_session_snapshot",
    "operation_from_request",
    "snapshot_to_contract",
]

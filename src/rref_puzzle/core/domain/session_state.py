"""
SessionState — Puzzle state enum and read-only session snapshot

SessionSnapshot is what the presentation layer reads after a completed
mutation: display strings only, no Rational values. It matches the
session_snapshot JSON Schema contract (core/contracts/schema).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rref_puzzle.core.domain.matrix import MAX_SIZE, MIN_SIZE, Matrix


# =============================================================================
# ENUMS
# =============================================================================


class PuzzleState(str, Enum):
    """State of the current puzzle."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class SessionSnapshot(BaseModel):
    """
    Immutable snapshot of a game session for display.

    Cells are formatted through format_rational, so denominators above 100
    appear approximated. Never feed these strings back into a session.
    """

    schema_version: str = Field("1", pattern="^1$", description="Contract version")
    size: int = Field(..., ge=MIN_SIZE, le=MAX_SIZE, description="Matrix size")
    level: int = Field(..., ge=1, description="Current level")
    score: int = Field(..., ge=0, description="Accumulated score")
    moves: int = Field(..., ge=0, description="Moves applied to the current puzzle")
    state: PuzzleState = Field(..., description="IN_PROGRESS or COMPLETE")
    matrix: tuple[tuple[str, ...], ...] = Field(..., description="Current matrix, display strings")
    original_matrix: tuple[tuple[str, ...], ...] = Field(
        ..., description="Matrix as generated, display strings"
    )

    model_config = {"frozen": True}

    @field_validator("matrix", "original_matrix")
    @classmethod
    def validate_shape(cls, v: tuple[tuple[str, ...], ...], info) -> tuple[tuple[str, ...], ...]:
        """Every matrix must be size x (size + 1)."""
        if "size" not in info.data:
            return v

        size = info.data["size"]
        if len(v) != size:
            raise ValueError(f"{info.field_name} has {len(v)} rows, expected {size}")
        for i, row in enumerate(v):
            if len(row) != size + 1:
                raise ValueError(
                    f"{info.field_name} row {i} has {len(row)} cells, expected {size + 1}"
                )
        return v

    @classmethod
    def capture(
        cls,
        *,
        size: int,
        level: int,
        score: int,
        moves: int,
        state: PuzzleState,
        matrix: Matrix,
        original_matrix: Matrix,
    ) -> "SessionSnapshot":
        """Build a snapshot from live session values."""
        return cls(
            size=size,
            level=level,
            score=score,
            moves=moves,
            state=state,
            matrix=tuple(tuple(row) for row in matrix.formatted()),
            original_matrix=tuple(tuple(row) for row in original_matrix.formatted()),
        )

    @property
    def is_complete(self) -> bool:
        return self.state == PuzzleState.COMPLETE

    def to_contract(self) -> dict[str, Any]:
        """JSON-compatible dict matching the session_snapshot schema."""
        return self.model_dump(mode="json")

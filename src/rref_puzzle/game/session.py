"""Game Session — state machine of the row-reduction puzzle.

Orchestrates generator, row operations, completion checker, scoring and
level/size progression. The only stateful component of the core.

States:
- IN_PROGRESS: operations are accepted
- COMPLETE: matrix is in RREF; waits for next_level() or new_matrix()

Transitions:
- IN_PROGRESS --apply_operation--> IN_PROGRESS | COMPLETE
- COMPLETE --next_level--> IN_PROGRESS (size grows every 3rd level, up to 5)
- any --new_matrix--> IN_PROGRESS (same size, level and score)
- any --reset_matrix--> IN_PROGRESS (back to the generated matrix)
"""

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from rref_puzzle.core.domain.matrix import MAX_SIZE, MIN_SIZE, Matrix
from rref_puzzle.core.domain.operations import AddMultiple, ScaleRow, SwapRows
from rref_puzzle.core.domain.session_state import PuzzleState, SessionSnapshot
from rref_puzzle.engine.generator import GeneratorConfig, IntegerSource, generate
from rref_puzzle.engine.row_operations import ChangedCells, apply_operation
from rref_puzzle.engine.rref_checker import is_rref

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class ScoringConfig:
    """Points for a solved puzzle: max(base_points - moves * penalty_per_move, min_points)."""

    base_points: int = 100
    penalty_per_move: int = 5
    min_points: int = 20

    def __post_init__(self) -> None:
        if self.penalty_per_move < 0:
            raise ValueError(f"penalty_per_move must be >= 0, got {self.penalty_per_move}")
        if self.min_points <= 0:
            raise ValueError(f"min_points must be > 0, got {self.min_points}")
        if self.base_points < self.min_points:
            raise ValueError(
                f"base_points {self.base_points} must be >= min_points {self.min_points}"
            )


@dataclass(frozen=True)
class ProgressionConfig:
    """
    Level and size progression.

    The matrix grows by one row/column whenever the new level is a multiple
    of levels_per_size_step, until max_size is reached.
    """

    initial_size: int = MIN_SIZE
    max_size: int = MAX_SIZE
    levels_per_size_step: int = 3
    initial_level: int = 1

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.initial_size <= MAX_SIZE:
            raise ValueError(
                f"initial_size must be in [{MIN_SIZE}, {MAX_SIZE}], got {self.initial_size}"
            )
        if not self.initial_size <= self.max_size <= MAX_SIZE:
            raise ValueError(
                f"max_size must be in [{self.initial_size}, {MAX_SIZE}], got {self.max_size}"
            )
        if self.levels_per_size_step < 1:
            raise ValueError(
                f"levels_per_size_step must be >= 1, got {self.levels_per_size_step}"
            )
        if self.initial_level < 1:
            raise ValueError(f"initial_level must be >= 1, got {self.initial_level}")


@dataclass(frozen=True)
class SessionConfig:
    """All tunables of a game session."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    progression: ProgressionConfig = field(default_factory=ProgressionConfig)


# =============================================================================
# ERRORS & RESULTS
# =============================================================================


class GameSessionErrorKind(str, Enum):
    """Transition not allowed in the current state."""

    ALREADY_COMPLETE = "ALREADY_COMPLETE"
    NOT_COMPLETE = "NOT_COMPLETE"


class GameSessionError(RuntimeError):
    """Requested transition is not available in the current state."""

    def __init__(self, kind: GameSessionErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class MoveResult:
    """Result of a successfully applied operation."""

    matrix: Matrix
    changed_cells: ChangedCells
    moves: int
    completed: bool
    points_awarded: int
    score: int

    # Diagnostics
    previous_state: PuzzleState
    new_state: PuzzleState
    transition_reason: str
    details: str


@dataclass(frozen=True)
class LevelTransition:
    """Result of next_level / new_matrix / reset_matrix."""

    level: int
    size: int
    size_increased: bool
    matrix: Matrix

    # Diagnostics
    previous_state: PuzzleState
    new_state: PuzzleState
    transition_reason: str


def points_for_moves(moves: int, config: Optional[ScoringConfig] = None) -> int:
    """
    Score awarded for solving a puzzle in `moves` moves.

    Examples:
        >>> points_for_moves(4)
        80
        >>> points_for_moves(20)
        20
    """
    config = config or ScoringConfig()
    return max(config.base_points - moves * config.penalty_per_move, config.min_points)


# =============================================================================
# SESSION
# =============================================================================


class GameSession:
    """Mutable game session.

    Each mutating call runs under one re-entrant lock, so a session may be
    shared with a concurrent host. Matrices are immutable and can be read
    without the lock; snapshot() gives a consistent view of all fields.

    Args:
        rng: Integer source for the generator (random.Random() if omitted)
        config: Session tunables (SessionConfig() if omitted)
    """

    def __init__(
        self,
        rng: Optional[IntegerSource] = None,
        config: Optional[SessionConfig] = None,
    ):
        self.config = config or SessionConfig()
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self._size = self.config.progression.initial_size
        self._level = self.config.progression.initial_level
        self._score = 0
        self._moves = 0
        self._is_complete = False

        self._original_matrix = self._generate()
        self._matrix = self._original_matrix

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def level(self) -> int:
        return self._level

    @property
    def score(self) -> int:
        return self._score

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def original_matrix(self) -> Matrix:
        return self._original_matrix

    @property
    def state(self) -> PuzzleState:
        return PuzzleState.COMPLETE if self._is_complete else PuzzleState.IN_PROGRESS

    def snapshot(self) -> SessionSnapshot:
        """Consistent read-only view for display."""
        with self._lock:
            return SessionSnapshot.capture(
                size=self._size,
                level=self._level,
                score=self._score,
                moves=self._moves,
                state=self.state,
                matrix=self._matrix,
                original_matrix=self._original_matrix,
            )

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def apply_operation(
        self,
        operation: Union[SwapRows, ScaleRow, AddMultiple],
    ) -> MoveResult:
        """
        Apply a row operation to the current matrix.

        On success moves is incremented; if the new matrix is in RREF the
        puzzle becomes COMPLETE and points_for_moves(moves) is added to the
        score, moves counting this last operation.

        Args:
            operation: SwapRows, ScaleRow or AddMultiple

        Returns:
            MoveResult with the new matrix, changed cells and scoring

        Raises:
            GameSessionError: kind=ALREADY_COMPLETE if the puzzle is solved
            OperationError: operation rejected; session left unchanged
        """
        with self._lock:
            if self._is_complete:
                raise GameSessionError(
                    GameSessionErrorKind.ALREADY_COMPLETE,
                    "Matrix Solved! Start the next level or a new matrix.",
                )

            previous_state = self.state
            outcome = apply_operation(self._matrix, operation)

            self._matrix = outcome.matrix
            self._moves += 1

            points = 0
            if is_rref(self._matrix):
                self._is_complete = True
                points = points_for_moves(self._moves, self.config.scoring)
                self._score += points
                logger.info(
                    "Puzzle solved at level %d in %d move(s): +%d points (score=%d)",
                    self._level,
                    self._moves,
                    points,
                    self._score,
                )

            new_state = self.state
            if new_state != previous_state:
                reason = "solved"
                details = f"RREF reached in {self._moves} move(s), +{points} points"
            else:
                reason = "operation_applied"
                details = f"{operation.describe()}, {len(outcome.changed_cells)} cell(s) changed"

            return MoveResult(
                matrix=self._matrix,
                changed_cells=outcome.changed_cells,
                moves=self._moves,
                completed=self._is_complete,
                points_awarded=points,
                score=self._score,
                previous_state=previous_state,
                new_state=new_state,
                transition_reason=reason,
                details=details,
            )

    def next_level(self) -> LevelTransition:
        """
        Advance to the next level after a solved puzzle.

        level is incremented first; if the new level is a multiple of
        levels_per_size_step and size < max_size, size grows by one. A new
        matrix is generated and moves / completion are reset.

        Raises:
            GameSessionError: kind=NOT_COMPLETE if the puzzle is not solved
        """
        with self._lock:
            if not self._is_complete:
                raise GameSessionError(
                    GameSessionErrorKind.NOT_COMPLETE,
                    "Solve the current matrix before moving to the next level",
                )

            progression = self.config.progression
            previous_state = self.state

            self._level += 1
            size_increased = (
                self._level % progression.levels_per_size_step == 0
                and self._size < progression.max_size
            )
            if size_increased:
                self._size += 1
                logger.info("Level %d: matrix size increased to %d", self._level, self._size)
            else:
                logger.info("Level %d: matrix size stays %d", self._level, self._size)

            self._start_puzzle()
            return self._create_transition(
                previous_state=previous_state,
                size_increased=size_increased,
                transition_reason="next_level",
            )

    def new_matrix(self) -> LevelTransition:
        """Replace the puzzle with a fresh one of the current size; level and score kept."""
        with self._lock:
            previous_state = self.state
            self._start_puzzle()
            return self._create_transition(
                previous_state=previous_state,
                size_increased=False,
                transition_reason="new_matrix",
            )

    def reset_matrix(self) -> LevelTransition:
        """Restore the generated matrix of the current puzzle; score kept."""
        with self._lock:
            previous_state = self.state
            self._matrix = self._original_matrix
            self._moves = 0
            self._is_complete = False
            logger.debug("Puzzle reset to its generated matrix")
            return self._create_transition(
                previous_state=previous_state,
                size_increased=False,
                transition_reason="reset_matrix",
            )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _generate(self) -> Matrix:
        return generate(self._size, self._rng, self.config.generator)

    def _start_puzzle(self) -> None:
        self._original_matrix = self._generate()
        self._matrix = self._original_matrix
        self._moves = 0
        self._is_complete = False

    def _create_transition(
        self,
        previous_state: PuzzleState,
        size_increased: bool,
        transition_reason: str,
    ) -> LevelTransition:
        return LevelTransition(
            level=self._level,
            size=self._size,
            size_increased=size_increased,
            matrix=self._matrix,
            previous_state=previous_state,
            new_state=self.state,
            transition_reason=transition_reason,
        )


def new_session(
    rng: Optional[IntegerSource] = None,
    config: Optional[SessionConfig] = None,
) -> GameSession:
    """Start a session: IN_PROGRESS, size 3, level 1, score 0, fresh matrix."""
    return GameSession(rng=rng, config=config)

"""Game session — scoring, levels and size progression around the matrix engine."""

from .session import (
    GameSession,
    GameSessionError,
    GameSessionErrorKind,
    LevelTransition,
    MoveResult,
    ProgressionConfig,
    ScoringConfig,
    SessionConfig,
    new_session,
    points_for_moves,
)

__all__ = [
    "GameSession",
    "GameSessionError",
    "GameSessionErrorKind",
    "LevelTransition",
    "MoveResult",
    "ProgressionConfig",
    "ScoringConfig",
    "SessionConfig",
    "new_session",
    "points_for_moves",
]

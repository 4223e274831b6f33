"""
Matrix Generator — random augmented puzzle matrices

For each of `size` rows draw `size + 1` integers uniformly from
[value_min, value_max]; then every zero on the diagonal is replaced with an
integer drawn from [diagonal_min, diagonal_max].

The diagonal nudge makes a singular coefficient block less likely but does
not rule it out.

Randomness is an injected capability: any object with randint(low, high)
(inclusive bounds), e.g. random.Random(seed).
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

from rref_puzzle.core.domain.matrix import Matrix, validate_size
from rref_puzzle.core.math.rational import Rational

logger = logging.getLogger(__name__)


class IntegerSource(Protocol):
    """Source of uniformly distributed integers in [low, high]."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Value ranges of generated matrices.

    Defaults: entries in [-9, 9], diagonal zeros replaced from [1, 5].
    """

    value_min: int = -9
    value_max: int = 9
    diagonal_min: int = 1
    diagonal_max: int = 5

    def __post_init__(self) -> None:
        if self.value_min > self.value_max:
            raise ValueError(
                f"value_min {self.value_min} must be <= value_max {self.value_max}"
            )
        if self.diagonal_min > self.diagonal_max:
            raise ValueError(
                f"diagonal_min {self.diagonal_min} must be <= diagonal_max {self.diagonal_max}"
            )
        if self.diagonal_min <= 0 <= self.diagonal_max:
            raise ValueError("diagonal range must not contain zero")


def generate(
    size: int,
    rng: Optional[IntegerSource] = None,
    config: Optional[GeneratorConfig] = None,
) -> Matrix:
    """
    Generate a fresh augmented matrix.

    Args:
        size: Matrix size in [3, 5]
        rng: Integer source (a new random.Random() if omitted)
        config: Value ranges (GeneratorConfig() if omitted)

    Returns:
        size x (size + 1) Matrix of integer Rationals

    Raises:
        ValueError: unsupported size
    """
    validate_size(size)
    rng = rng or random.Random()
    config = config or GeneratorConfig()

    values = [
        [rng.randint(config.value_min, config.value_max) for _ in range(size + 1)]
        for _ in range(size)
    ]

    for i in range(size):
        if values[i][i] == 0:
            values[i][i] = rng.randint(config.diagonal_min, config.diagonal_max)

    matrix = Matrix(tuple(tuple(Rational(v) for v in row) for row in values))
    logger.debug("Generated %dx%d matrix:\n%s", size, size + 1, matrix)
    return matrix

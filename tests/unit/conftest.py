"""Shared fixtures for unit tests."""

import random

import pytest

from rref_puzzle.core.domain.matrix import Matrix


class ScriptedSource:
    """Integer source returning pre-recorded values; checks requested bounds."""

    def __init__(self, values):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted_source():
    """Factory for ScriptedSource."""
    return ScriptedSource


@pytest.fixture
def seeded_rng():
    return random.Random(20240601)


@pytest.fixture
def scenario_matrix() -> Matrix:
    """[[2,0,0,4],[0,1,0,3],[0,0,1,5]]: one Scale away from RREF."""
    return Matrix.from_values([[2, 0, 0, 4], [0, 1, 0, 3], [0, 0, 1, 5]])

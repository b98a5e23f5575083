from __future__ import annotations

import pytest

from circuit_grow.geometry import Grid


class ScriptedRandom:
    """Stand-in for random.Random returning a fixed draw and the first choice."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scripted_random():
    """Factory for scripted RNGs with a given fixed draw."""
    return ScriptedRandom


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def make_grid():
    """Factory building a grid with the given {(x, y): segment} cells set."""

    def _make_grid(width: int, height: int, cells: dict | None = None) -> Grid:
        grid = Grid.empty(width, height)
        for (x, y), seg in (cells or {}).items():
            grid.set(x, y, seg)
        return grid

    return _make_grid

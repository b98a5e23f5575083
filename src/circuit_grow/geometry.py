"""Geometry data model for the growing circuit grid."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

Direction = tuple[int, int]


def sanitize_directions(directions: Iterable[Sequence[float]]) -> list[Direction]:
    """Round raw (dx, dy) pairs to integers and drop the ones that become (0, 0).

    Halves round up (``0.5 -> 1``, ``-0.5 -> 0``).
    """
    result: list[Direction] = []
    for raw in directions:
        dx, dy = (int(math.floor(float(n) + 0.5)) for n in raw)
        if dx != 0 or dy != 0:
            result.append((dx, dy))
    return result


@dataclass(frozen=True)
class Wire:
    """A wire segment continuing into the neighbour at ``conn``."""

    conn: Direction
    time: float  # creation tick


@dataclass(frozen=True)
class Resistor:
    """A resistor; its connection matches in both directions along its axis."""

    conn: Direction
    time: float  # creation tick


Segment = Union[Wire, Resistor]
Cell = Union[Segment, None]


def segment_kind(segment: Segment) -> str:
    if isinstance(segment, Wire):
        return "wire"
    if isinstance(segment, Resistor):
        return "resistor"
    raise TypeError(f"Unknown segment type: {type(segment).__name__}")


@dataclass
class Grid:
    """Column-major cell array, ``columns[x][y]``.

    The x axis is circular so whole columns can be recycled while scrolling;
    the y axis is bounded.
    """

    columns: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def empty(cls, width: int, height: int) -> Grid:
        return cls(columns=[[None] * height for _ in range(width)])

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def height(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    def wrap_x(self, x: int) -> int:
        return x % self.width

    def y_in_range(self, y: int) -> bool:
        return 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Cell at (x, y) with x wrapped; None when y is off the grid."""
        if not self.columns or not self.y_in_range(y):
            return None
        return self.columns[self.wrap_x(x)][y]

    def get_unwrapped(self, x: int, y: int) -> Cell:
        """Cell at (x, y) without wrapping; None outside the grid on either axis."""
        if not 0 <= x < self.width or not self.y_in_range(y):
            return None
        return self.columns[x][y]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self.columns[self.wrap_x(x)][y] = cell

    def clear_column(self, x: int) -> None:
        self.columns[self.wrap_x(x)] = [None] * self.height

    def occupied(self) -> Iterator[tuple[int, int, Segment]]:
        for x, column in enumerate(self.columns):
            for y, cell in enumerate(column):
                if cell is not None:
                    yield x, y, cell

    def count(self, kind: str | None = None) -> int:
        """Number of occupied cells, optionally only of one segment kind."""
        return sum(
            1 for _, _, seg in self.occupied() if kind is None or segment_kind(seg) == kind
        )

"""Core growth algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import Literal, Union

from circuit_grow.config import Config
from circuit_grow.geometry import Direction, Grid, Resistor, Segment, Wire

logger = logging.getLogger(__name__)

# A wire neighbour is only grown into while it has fewer connections than this.
MAX_WIRE_FAN_OUT = 2


@dataclass(frozen=True)
class NoGrowth:
    """No segment may be placed in the cell this sweep."""

    reason: Literal["none-found", "rejected"]


@dataclass(frozen=True)
class Candidates:
    """Segments that could legally occupy the cell; never empty."""

    segments: list[Segment] = field(default_factory=list)


GrowthResult = Union[NoGrowth, Candidates]


def new_segment(
    config: Config,
    rng: random.Random,
    time: float,
    connection: Direction | None = None,
    directions: list[Direction] | None = None,
) -> Segment:
    """Create a segment stamped with ``time``.

    Without ``connection`` a direction is drawn uniformly from the sanitized
    direction set. The segment is a resistor with probability
    ``resistor_chance`` and a wire otherwise.
    """
    if connection is None:
        if directions is None:
            directions = config.sanitized_directions()
        if not directions:
            raise ValueError("cannot seed a segment: direction set is empty")
        connection = rng.choice(directions)
    if rng.random() < config.resistor_chance:
        return Resistor(conn=connection, time=time)
    return Wire(conn=connection, time=time)


def count_existing(
    grid: Grid,
    x: int,
    y: int,
    directions: list[Direction],
    time: float | None = None,
) -> int:
    """Count neighbours of (x, y) from earlier ticks that connect back to it."""
    total = 0
    for dx, dy in directions:
        cell = grid.get_unwrapped(x + dx, y + dy)
        if cell is None or cell.time == time:
            continue
        if isinstance(cell, Resistor):
            total += cell.conn in ((dx, dy), (-dx, -dy))
        elif isinstance(cell, Wire):
            total += cell.conn == (-dx, -dy)
        else:
            raise TypeError(f"Unknown segment type: {type(cell).__name__}")
    return total


def _diagonal_blocked(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    """True if an existing diagonal already crosses the gap towards (x+dx, y+dy)."""
    if dx == 0 or dy == 0:
        return False
    across_x = grid.get(x, y + dy)
    if across_x is not None and across_x.conn == (dx, -dy):
        return True
    across_y = grid.get(x + dx, y)
    return across_y is not None and across_y.conn == (-dx, dy)


def possible_cells(
    grid: Grid,
    x: int,
    y: int,
    config: Config,
    rng: random.Random,
    time: float,
    directions: list[Direction] | None = None,
) -> GrowthResult:
    """Propose segments for the empty cell (x, y) based on its occupied neighbours."""
    if directions is None:
        directions = config.sanitized_directions()

    found: list[Segment] = []
    for dx, dy in directions:
        neighbour = grid.get(x + dx, y + dy)
        if neighbour is None or neighbour.time == time:
            continue
        if _diagonal_blocked(grid, x, y, dx, dy):
            continue

        connection = (dx, dy)
        if isinstance(neighbour, Wire):
            # Fan-out is counted on the unwrapped neighbour coordinate.
            if count_existing(grid, x + dx, y + dy, directions, time) < MAX_WIRE_FAN_OUT:
                found.append(new_segment(config, rng, time, connection, directions))
        elif isinstance(neighbour, Resistor):
            # Only continue along the resistor's own axis.
            if neighbour.conn in (connection, (-dx, -dy)):
                found.append(Wire(conn=connection, time=time))
        else:
            raise TypeError(f"Unknown segment type: {type(neighbour).__name__}")

    accepted = rng.random() < config.place_chance
    if not found:
        return NoGrowth(reason="none-found")
    if not accepted:
        return NoGrowth(reason="rejected")
    return Candidates(segments=found)


def place_cells(grid: Grid, config: Config, rng: random.Random, time: float) -> int:
    """Run one growth sweep over every cell at tick ``time``.

    Each empty cell receives at most one segment. Segments written during the
    sweep carry ``time`` and are therefore invisible to the rest of it.
    Returns the number of cells written.
    """
    directions = config.sanitized_directions()
    if not directions:
        logger.debug("Skipping sweep at t=%.3f: no usable directions", time)
        return 0

    placed = 0
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.columns[x][y] is not None:
                continue
            result = possible_cells(grid, x, y, config, rng, time, directions)
            if isinstance(result, Candidates):
                grid.columns[x][y] = rng.choice(result.segments)
                placed += 1
            elif rng.random() < config.random_cell_chance:
                grid.columns[x][y] = new_segment(config, rng, time, directions=directions)
                placed += 1

    logger.debug("Sweep at t=%.3f placed %d segment(s)", time, placed)
    return placed

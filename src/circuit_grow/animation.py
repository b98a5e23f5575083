"""Frame orchestration: state initialisation, throttled growth and scrolling."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
import math
import random

from circuit_grow.config import Config
from circuit_grow.geometry import Grid
from circuit_grow.growth import new_segment, place_cells
from circuit_grow.scroll import X_PADDING, FrameView, clear_end_columns, frame_view, scroll_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameTime:
    """Clock values supplied by the host for one frame (seconds)."""

    now: float
    delta: float
    animation_start: float = 0.0


@dataclass
class AnimationState:
    """Per-run state threaded through :func:`advance`."""

    grid: Grid
    dt_acc: float = 0.0
    frames: int = 0
    sweeps: int = 0


def grid_dimensions(canvas_width: float, canvas_height: float, cell_size: float) -> tuple[int, int]:
    """Grid (width, height) in cells for a canvas, including the off-screen padding."""
    width = math.ceil(canvas_width / cell_size) + X_PADDING * 2
    height = math.ceil(canvas_height / cell_size)
    return width, height


def init(canvas_width: float, canvas_height: float, config: Config, rng: random.Random) -> AnimationState:
    """Build a fresh grid holding a single seed segment at its centre."""
    width, height = grid_dimensions(canvas_width, canvas_height, config.cell_size)
    grid = Grid.empty(width, height)

    directions = config.sanitized_directions()
    if directions and height > 0:
        grid.set(width // 2, height // 2, new_segment(config, rng, 0, directions=directions))
    else:
        logger.warning("Grid %dx%d initialised without a seed segment", width, height)

    logger.info("Initialised %dx%d grid for %gx%g canvas", width, height, canvas_width, canvas_height)
    return AnimationState(grid=grid)


def resize(canvas_width: float, canvas_height: float, config: Config, rng: random.Random) -> AnimationState:
    """Discard all growth and start again for the new canvas size."""
    return init(canvas_width, canvas_height, config, rng)


def advance(
    state: AnimationState,
    config: Config,
    canvas_width: float,
    canvas_height: float,
    frame_time: FrameTime,
    rng: random.Random,
) -> tuple[AnimationState, FrameView]:
    """Advance the animation by one frame and return the new state and its view."""
    width, _ = grid_dimensions(canvas_width, canvas_height, config.cell_size)
    if width != state.grid.width:
        logger.info("Grid width changed %d -> %d, reinitialising", state.grid.width, width)
        state = resize(canvas_width, canvas_height, config, rng)

    x_offset = scroll_offset(frame_time.now, frame_time.animation_start, config.move_speed)

    grid = state.grid
    sweeps = state.sweeps
    dt_acc = state.dt_acc + frame_time.delta
    if dt_acc > config.place_speed:
        place_cells(grid, config, rng, frame_time.now)
        sweeps += 1
    dt_acc = dt_acc % config.place_speed if config.place_speed > 0 else 0.0

    clear_end_columns(grid, x_offset)
    view = frame_view(grid, x_offset, canvas_width, canvas_height)

    return AnimationState(grid=grid, dt_acc=dt_acc, frames=state.frames + 1, sweeps=sweeps), view


def run_frames(
    config: Config,
    canvas_width: float,
    canvas_height: float,
    frames: int,
    fps: float,
    rng: random.Random,
) -> Iterator[tuple[AnimationState, FrameView]]:
    """Drive the animation headlessly at a fixed frame rate."""
    delta = 1.0 / fps
    state = init(canvas_width, canvas_height, config, rng)
    for i in range(frames):
        state, view = advance(
            state, config, canvas_width, canvas_height, FrameTime(now=(i + 1) * delta, delta=delta), rng
        )
        yield state, view

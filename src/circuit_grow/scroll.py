"""Horizontal scrolling, column recycling and the per-frame render snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

from circuit_grow.geometry import Direction, Grid, segment_kind

# Off-screen columns kept at each side of the visible area.
X_PADDING = 2


@dataclass
class RenderedSegment:
    """One occupied cell mapped onto the canvas."""

    x: int
    y: int
    kind: str  # "wire" or "resistor"
    conn: Direction
    start: tuple[float, float]  # px, cell centre
    end: tuple[float, float]  # px, neighbour centre


@dataclass
class FrameView:
    """Everything the renderer needs for one frame."""

    canvas_width: float
    canvas_height: float
    grid_width: int
    grid_height: int
    x_offset: float  # cells
    segments: list[RenderedSegment] = field(default_factory=list)

    def to_canvas(self, x: float, y: float) -> tuple[float, float]:
        """Map fractional grid coordinates to canvas pixels."""
        visible = self.grid_width - 2 * X_PADDING
        px = ((x + self.x_offset) % self.grid_width - X_PADDING) / visible * self.canvas_width
        py = y / self.grid_height * self.canvas_height
        return px, py


def scroll_offset(now: float, animation_start: float, move_speed: float) -> float:
    """Horizontal offset in cells; decreases over time so the view drifts left."""
    return -(now - animation_start) * move_speed


def recycle_band(width: int, x_offset: float, padding: int = X_PADDING) -> list[int]:
    """Column indices about to wrap back into view at the scrolling edge."""
    start = math.ceil((width - padding - x_offset) % width)
    return [(start + i) % width for i in range(padding)]


def clear_end_columns(grid: Grid, x_offset: float, padding: int = X_PADDING) -> list[int]:
    """Blank the recycle band in place and return the blanked column indices."""
    band = recycle_band(grid.width, x_offset, padding)
    for x in band:
        grid.clear_column(x)
    return band


def frame_view(grid: Grid, x_offset: float, canvas_width: float, canvas_height: float) -> FrameView:
    """Snapshot the occupied cells of ``grid`` in canvas coordinates.

    Segments whose stroke would span more than half the canvas straddle the
    wrap seam and are left out.
    """
    view = FrameView(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        grid_width=grid.width,
        grid_height=grid.height,
        x_offset=x_offset,
    )
    if grid.width <= 2 * X_PADDING or grid.height == 0:
        return view

    for x, y, seg in grid.occupied():
        dx, dy = seg.conn
        start = view.to_canvas(x + 0.5, y + 0.5)
        end = view.to_canvas(x + dx + 0.5, y + dy + 0.5)
        if abs(start[0] - end[0]) >= canvas_width / 2:
            continue
        view.segments.append(
            RenderedSegment(x=x, y=y, kind=segment_kind(seg), conn=seg.conn, start=start, end=end)
        )
    return view

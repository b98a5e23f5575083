"""Functions for generating an ASCII summary of an animation run."""

from __future__ import annotations

from circuit_grow.animation import AnimationState
from circuit_grow.config import Config


def generate_report(
    state: AnimationState,
    config: Config,
    canvas_width: float,
    canvas_height: float,
) -> str:
    """Generates a multi-line ASCII report of the final animation state."""
    grid = state.grid
    n_cells = grid.width * grid.height
    wires = grid.count("wire")
    resistors = grid.count("resistor")
    occupancy = ((wires + resistors) / n_cells) * 100.0 if n_cells else 0.0

    report_lines = [
        "--- Circuit Growth Report ---",
        "",
        "** Grid Dimensions **",
        f"  - Canvas: {canvas_width:g} px x {canvas_height:g} px",
        f"  - Cell Size: {config.cell_size:g} px",
        f"  - Grid (X x Y): {grid.width} x {grid.height} cells",
        f"  - Effective Seed: {config.effective_seed if config.effective_seed is not None else config.random_seed_value}",
        "",
        "** Run **",
        f"  - Frames: {state.frames}",
        f"  - Growth Sweeps: {state.sweeps}",
        f"  - Placement Interval: {config.place_speed:g} s",
        f"  - Movement Speed: {config.move_speed:g} cells/s",
        "",
        "** Segment Counts **",
        f"  - Wires: {wires}",
        f"  - Resistors: {resistors}",
        f"  - Occupancy: {occupancy:.2f}%",
        "",
        "** Directions **",
    ]

    directions = config.sanitized_directions()
    if directions:
        report_lines.append("  - " + " ".join(f"({dx},{dy})" for dx, dy in directions))
    else:
        report_lines.append("  - none (growth disabled)")

    report_lines.append("\n--- End of Report ---")

    return "\n".join(report_lines)

from __future__ import annotations

from circuit_grow.animation import AnimationState
from circuit_grow.config import Config
from circuit_grow.geometry import Grid, Resistor, Wire
from circuit_grow.reporter import generate_report


def test_report_contents():
    grid = Grid.empty(10, 5)
    grid.set(1, 1, Wire(conn=(1, 0), time=0))
    grid.set(2, 1, Wire(conn=(1, 0), time=1))
    grid.set(3, 1, Resistor(conn=(1, 0), time=1))
    state = AnimationState(grid=grid, frames=12, sweeps=3)
    config = Config(random_seed_value=4)
    config.make_rng()

    report = generate_report(state, config, 300, 250)

    assert "Grid (X x Y): 10 x 5 cells" in report
    assert "Canvas: 300 px x 250 px" in report
    assert "Effective Seed: 4.0" in report
    assert "Frames: 12" in report
    assert "Growth Sweeps: 3" in report
    assert "Wires: 2" in report
    assert "Resistors: 1" in report
    assert "Occupancy: 6.00%" in report
    assert "(1,1)" in report
    assert report.endswith("--- End of Report ---")


def test_report_without_directions():
    state = AnimationState(grid=Grid.empty(4, 2))
    report = generate_report(state, Config(directions=[(0, 0)]), 100, 100)
    assert "none (growth disabled)" in report
    assert "Effective Seed: random" in report

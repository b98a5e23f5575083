from __future__ import annotations

import pytest

from circuit_grow.geometry import Grid, Resistor, Wire, sanitize_directions, segment_kind


def test_sanitize_rounds_and_drops_zero_pairs():
    assert sanitize_directions([[0, 0], [1.4, -0.6]]) == [(1, -1)]


def test_sanitize_is_idempotent():
    once = sanitize_directions([(-1, -1), (0.2, 0.3), (2.6, 0), (0, -1)])
    assert once == [(-1, -1), (3, 0), (0, -1)]
    assert sanitize_directions(once) == once


def test_sanitize_rounds_halves_up():
    assert sanitize_directions([(0.5, -0.5), (-0.5, -0.5)]) == [(1, 0)]


def test_sanitize_empty():
    assert sanitize_directions([]) == []
    assert sanitize_directions([(0.1, -0.4)]) == []


def test_get_wraps_x_and_rejects_y():
    grid = Grid.empty(4, 3)
    wire = Wire(conn=(1, 0), time=0)
    grid.set(0, 1, wire)

    assert grid.get(4, 1) is wire
    assert grid.get(-4, 1) is wire
    assert grid.get(0, -1) is None
    assert grid.get(0, 3) is None


def test_get_unwrapped_treats_both_axes_as_bounded():
    grid = Grid.empty(4, 3)
    wire = Wire(conn=(1, 0), time=0)
    grid.set(0, 1, wire)

    assert grid.get_unwrapped(0, 1) is wire
    assert grid.get_unwrapped(4, 1) is None
    assert grid.get_unwrapped(-1, 1) is None


def test_clear_column_and_counts():
    grid = Grid.empty(3, 2)
    grid.set(1, 0, Wire(conn=(0, 1), time=0))
    grid.set(1, 1, Resistor(conn=(0, -1), time=0))
    grid.set(2, 0, Wire(conn=(-1, 0), time=0))

    assert grid.count() == 3
    assert grid.count("wire") == 2
    assert grid.count("resistor") == 1

    grid.clear_column(4)  # wraps to column 1
    assert grid.count() == 1
    assert [(x, y) for x, y, _ in grid.occupied()] == [(2, 0)]


def test_dimensions():
    grid = Grid.empty(5, 7)
    assert (grid.width, grid.height) == (5, 7)
    assert Grid().height == 0


def test_segment_kind_rejects_unknown_variants():
    assert segment_kind(Wire(conn=(1, 0), time=0)) == "wire"
    assert segment_kind(Resistor(conn=(1, 0), time=0)) == "resistor"
    with pytest.raises(TypeError):
        segment_kind(object())

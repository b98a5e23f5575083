from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from circuit_grow.config import DEFAULT_DIRECTIONS, Config, load_config


def test_defaults():
    config = Config()
    assert config.move_speed == 1.5
    assert config.place_speed == 0.2
    assert config.place_chance == 0.07
    assert config.sanitized_directions() == [tuple(d) for d in DEFAULT_DIRECTIONS]
    assert len(config.resistor_colours) == 6


def test_load_config(tmp_path):
    path = tmp_path / "circuit.yaml"
    path.write_text(
        "move_speed: 3\n"
        "wire_colour: '#fff1bd'\n"
        "directions:\n"
        "  - [1, 0]\n"
        "  - [0.4, 0.4]\n"
        "  - [-1.6, 0]\n"
        "random_seed_value: 7\n"
    )
    config = load_config(path)

    assert config.move_speed == 3
    assert config.wire_colour == "FFF1BD"
    assert config.sanitized_directions() == [(1, 0), (-2, 0)]
    assert config.place_speed == 0.2


def test_load_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path).model_dump() == Config().model_dump()


@pytest.mark.parametrize(
    "field, value",
    [
        ("place_chance", 1.5),
        ("resistor_chance", -0.1),
        ("random_cell_chance", 2),
        ("cell_size", 0),
        ("place_speed", -1),
        ("bg_colour", "green"),
        ("resistor_colours", ["12345"]),
        ("move_speed", float("inf")),
        ("place_speed", float("inf")),
        ("cell_size", float("inf")),
        ("place_chance", float("nan")),
        ("directions", [(float("inf"), 0)]),
        ("directions", [(1, float("nan"))]),
    ],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Config(**{field: value})


def test_empty_direction_set_is_reported(caplog):
    with caplog.at_level(logging.WARNING, logger="circuit_grow.config"):
        config = Config(directions=[(0, 0), (0.3, -0.2)])
    assert config.sanitized_directions() == []
    assert "growth is disabled" in caplog.text


def test_make_rng_with_fixed_seed_is_reproducible():
    config = Config(random_seed_value=11)
    first = [config.make_rng().random() for _ in range(2)]
    assert first[0] == first[1]
    assert config.effective_seed == 11.0


def test_make_rng_random_records_seed():
    config = Config()
    assert config.effective_seed is None
    config.make_rng()
    seed = config.effective_seed
    assert isinstance(seed, int)
    config.make_rng()
    assert config.effective_seed == seed


def test_load_config_rejects_yaml_infinity(tmp_path):
    path = tmp_path / "inf.yaml"
    path.write_text("move_speed: .inf\ndirections:\n  - [.inf, 0]\n")
    with pytest.raises(ValidationError):
        load_config(path)

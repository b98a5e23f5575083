"""Pydantic models for YAML configuration parsing."""

from __future__ import annotations

import logging
from pathlib import Path
import random
import re
from typing import Literal

import yaml
from pydantic import BaseModel, Field, FiniteFloat, PrivateAttr, field_validator, model_validator

from circuit_grow.geometry import Direction, sanitize_directions

logger = logging.getLogger(__name__)

_HEX_COLOUR = re.compile(r"^[0-9A-Fa-f]{6}$")

DEFAULT_DIRECTIONS: list[tuple[float, float]] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

DEFAULT_RESISTOR_COLOURS = ["E70000", "FF8C00", "FFEF00", "00811F", "0044FF", "760089"]


def _normalise_colour(value: str) -> str:
    value = str(value).lstrip("#")
    if not _HEX_COLOUR.match(value):
        raise ValueError(f"'{value}' is not a RRGGBB hex colour")
    return value.upper()


class Config(BaseModel):
    """Tunable constants, read fresh by the animation every frame."""

    bg_colour: str = "2F9D0F"
    wire_colour: str = "FFF1BD"
    resistor_bg_colour: str = "C2B498"
    resistor_colours: list[str] = Field(default_factory=lambda: list(DEFAULT_RESISTOR_COLOURS))

    move_speed: float = Field(default=1.5, ge=0, allow_inf_nan=False)  # cells per second
    place_speed: float = Field(default=0.2, ge=0, allow_inf_nan=False)  # seconds between sweeps
    random_cell_chance: float = Field(default=0.0002, ge=0, le=1, allow_inf_nan=False)
    cell_size: float = Field(default=50, gt=0, allow_inf_nan=False)  # px
    resistor_chance: float = Field(default=0.05, ge=0, le=1, allow_inf_nan=False)
    place_chance: float = Field(default=0.07, ge=0, le=1, allow_inf_nan=False)
    directions: list[tuple[FiniteFloat, FiniteFloat]] = Field(default_factory=lambda: list(DEFAULT_DIRECTIONS))

    random_seed_value: float | int | Literal["random"] = "random"

    _effective_seed: int | float | None = PrivateAttr(default=None)
    _config_path: Path | None = PrivateAttr(default=None)

    @field_validator("bg_colour", "wire_colour", "resistor_bg_colour")
    @classmethod
    def _check_colour(cls, value: str) -> str:
        return _normalise_colour(value)

    @field_validator("resistor_colours")
    @classmethod
    def _check_colours(cls, values: list[str]) -> list[str]:
        return [_normalise_colour(v) for v in values]

    @property
    def effective_seed(self) -> int | float | None:
        return self._effective_seed

    def make_rng(self) -> random.Random:
        """Return a run RNG and capture the effective seed for reporting."""
        if self._effective_seed is None:
            if self.random_seed_value == "random":
                self._effective_seed = random.SystemRandom().randrange(0, 2**63)
            else:
                self._effective_seed = float(self.random_seed_value)
        return random.Random(self._effective_seed)

    def sanitized_directions(self) -> list[Direction]:
        return sanitize_directions(self.directions)

    @model_validator(mode="after")
    def validate_semantics(self) -> Config:
        # An empty set is legal but nothing can ever grow.
        if not self.sanitized_directions():
            logger.warning(
                "directions contains no non-zero integer offsets after rounding; growth is disabled"
            )
        return self


def load_config(path: str | Path) -> Config:
    """Load and validate a YAML configuration file."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = Config.model_validate(raw)
    config._config_path = path
    return config

"""Game configuration.

``GameConfig`` is an immutable bundle of every tunable the core reads.
``validate`` enforces the geometric assumptions the simulation relies on
(grid fits the field, the ball cannot tunnel through a block in one
tick). The application layer can build a config from a JSON file and
override the seed from the environment; the core itself reads no files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping

from blockbreaker import constants as C
from blockbreaker.logger import get_logger

log = get_logger("config")

CONFIG_ENV = "BLOCKBREAKER_CONFIG"
SEED_ENV = "BLOCKBREAKER_SEED"


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a valid game."""


@dataclass(frozen=True)
class GameConfig:
    field_width: int = C.FIELD_WIDTH
    field_height: int = C.FIELD_HEIGHT
    paddle_width: int = C.PADDLE_WIDTH
    paddle_height: int = C.PADDLE_HEIGHT
    ball_radius: int = C.BALL_RADIUS
    ball_speed: float = C.BALL_SPEED
    block_rows: int = C.BLOCK_ROWS
    block_cols: int = C.BLOCK_COLS
    block_width: int = C.BLOCK_WIDTH
    block_height: int = C.BLOCK_HEIGHT
    block_spacing: int = C.BLOCK_SPACING
    top_margin: int = C.TOP_MARGIN
    side_margin: int = C.SIDE_MARGIN
    initial_lives: int = C.INITIAL_LIVES
    score_per_block: int = C.SCORE_PER_BLOCK
    rng_seed: int | None = None  # None -> wall clock at simulation construction

    # Derived geometry -------------------------------------------------
    @property
    def paddle_y(self) -> float:
        return self.field_height - C.PADDLE_BOTTOM_OFFSET

    @property
    def ball_rest_y(self) -> float:
        return self.field_height - C.BALL_REST_OFFSET

    @property
    def grid_width(self) -> float:
        return self.block_cols * self.block_width + (self.block_cols - 1) * self.block_spacing

    @property
    def block_count(self) -> int:
        return self.block_rows * self.block_cols

    def validate(self) -> "GameConfig":
        """Raise ConfigError if the configuration is unusable; return self otherwise."""
        for f in fields(self):
            if f.name in ("ball_speed", "rng_seed"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")
        positive = (
            "field_width",
            "field_height",
            "paddle_width",
            "paddle_height",
            "ball_radius",
            "ball_speed",
            "block_rows",
            "block_cols",
            "block_width",
            "block_height",
            "initial_lives",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("block_spacing", "top_margin", "side_margin", "score_per_block"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.paddle_width > self.field_width:
            raise ConfigError(f"paddle_width {self.paddle_width} exceeds field_width {self.field_width}")
        if self.side_margin + self.grid_width > self.field_width - self.side_margin:
            raise ConfigError(
                f"block grid ({self.grid_width} wide) does not fit between side margins "
                f"[{self.side_margin}, {self.field_width - self.side_margin}]"
            )
        if self.ball_speed > min(self.block_width, self.block_height):
            raise ConfigError(
                f"ball_speed {self.ball_speed} exceeds smallest block dimension "
                f"{min(self.block_width, self.block_height)}; the ball could skip blocks"
            )
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        """Build a validated config from a mapping; unknown keys are rejected."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key == "rng_seed":
                if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                    raise ConfigError(f"rng_seed must be an integer or null, got {value!r}")
                kwargs[key] = value
                continue
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number, got {value!r}")
            if key == "ball_speed":
                kwargs[key] = float(value)
            elif isinstance(value, float) and not value.is_integer():
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            else:
                # JSON writers may emit 9.0 for 9
                kwargs[key] = int(value)
        return cls(**kwargs).validate()


def load_config(path: str | os.PathLike | None = None, env: Mapping[str, str] | None = None) -> GameConfig:
    """Load a config for the application.

    ``path`` (or ``$BLOCKBREAKER_CONFIG``) names an optional JSON object of
    overrides; ``$BLOCKBREAKER_SEED`` overrides the seed.
    """
    env = os.environ if env is None else env
    path = path if path is not None else env.get(CONFIG_ENV)
    data: dict[str, Any] = {}
    if path:
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config file {path} must contain a JSON object")
        log.info(f"Loaded config overrides from {path}: {sorted(data)}")
    seed_text = env.get(SEED_ENV)
    if seed_text:
        try:
            data["rng_seed"] = int(seed_text)
        except ValueError as e:
            raise ConfigError(f"{SEED_ENV} must be an integer, got {seed_text!r}") from e
    return GameConfig.from_dict(data)


__all__ = ["ConfigError", "GameConfig", "load_config", "CONFIG_ENV", "SEED_ENV"]

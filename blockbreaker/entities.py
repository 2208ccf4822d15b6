from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from blockbreaker.config import ConfigError, GameConfig
from blockbreaker.constants import BALL_LAUNCH_ANGLE, BLOCK_COLOR_MIN
from blockbreaker.rng_service import RNGService

Color = Tuple[float, float, float]


def _require_positive(owner: str, **dims: float) -> None:
    for name, value in dims.items():
        if value <= 0:
            raise ConfigError(f"{owner}.{name} must be positive, got {value!r}")


@dataclass
class Ball:
    x: float
    y: float
    dx: float
    dy: float
    radius: float

    def __post_init__(self):
        _require_positive("Ball", radius=self.radius)

    @staticmethod
    def launch_velocity(speed: float) -> Tuple[float, float]:
        """Up and to the right at 45 degrees."""
        return speed * math.cos(BALL_LAUNCH_ANGLE), -speed * math.sin(BALL_LAUNCH_ANGLE)

    @classmethod
    def spawn(cls, x: float, y: float, radius: float, speed: float) -> "Ball":
        dx, dy = cls.launch_velocity(speed)
        return cls(x, y, dx, dy, radius)

    @property
    def speed(self) -> float:
        return math.hypot(self.dx, self.dy)

    def move(self) -> None:
        self.x += self.dx
        self.y += self.dy

    def rest_at(self, x: float, y: float, speed: float) -> None:
        self.x = x
        self.y = y
        self.dx, self.dy = self.launch_velocity(speed)


@dataclass
class Paddle:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        _require_positive("Paddle", width=self.width, height=self.height)

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.x - self.half_width, self.y - self.half_height, self.width, self.height)

    def clamp_x(self, px: float, field_width: float) -> float:
        return max(self.half_width, min(px, field_width - self.half_width))

    def move_to(self, px: float, field_width: float) -> None:
        self.x = self.clamp_x(px, field_width)


@dataclass
class Block:
    x: float
    y: float
    width: float
    height: float
    color: Color
    active: bool = True

    def __post_init__(self):
        _require_positive("Block", width=self.width, height=self.height)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def deactivate(self) -> None:
        self.active = False


def random_block_color(rng: RNGService) -> Color:
    return (
        rng.between(BLOCK_COLOR_MIN, 1.0),
        rng.between(BLOCK_COLOR_MIN, 1.0),
        rng.between(BLOCK_COLOR_MIN, 1.0),
    )


def block_layout(config: GameConfig) -> List[Tuple[float, float]]:
    """Top-left corners of the block grid in row-major order."""
    positions = []
    for row in range(config.block_rows):
        for col in range(config.block_cols):
            bx = config.side_margin + col * (config.block_width + config.block_spacing)
            by = config.top_margin + row * (config.block_height + config.block_spacing)
            positions.append((float(bx), float(by)))
    return positions


def build_blocks(config: GameConfig, palette: List[Color]) -> List[Block]:
    return [
        Block(bx, by, config.block_width, config.block_height, color)
        for (bx, by), color in zip(block_layout(config), palette)
    ]


__all__ = ["Ball", "Paddle", "Block", "Color", "random_block_color", "block_layout", "build_blocks"]

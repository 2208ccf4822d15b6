"""Pure geometric helpers for ball collisions.

Rectangles are ``(x, y, w, h)`` sequences with ``(x, y)`` the top-left
corner in field units (y grows downward).
"""

from __future__ import annotations

import enum
import math
from typing import Sequence, Tuple

Point = Tuple[float, float]
RectLike = Sequence[float]


class Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def horizontal(self) -> bool:
        """True for the vertical edges, which reverse horizontal motion."""
        return self in (Side.LEFT, Side.RIGHT)


def closest_point_on_rect(cx: float, cy: float, rx: float, ry: float, rw: float, rh: float) -> Point:
    px = max(rx, min(cx, rx + rw))
    py = max(ry, min(cy, ry + rh))
    return px, py


def circle_rect_overlap(cx: float, cy: float, r: float, rect: RectLike) -> bool:
    """Strict overlap: touching at exactly distance ``r`` does not count."""
    px, py = closest_point_on_rect(cx, cy, *rect)
    ddx = cx - px
    ddy = cy - py
    return ddx * ddx + ddy * ddy < r * r


def classify_hit_side(closest: Point, rect: RectLike) -> Side:
    """Side of ``rect`` the closest point lies on; left/right win corner ties."""
    px, py = closest
    rx, ry, rw, _ = rect
    if px == rx:
        return Side.LEFT
    if px == rx + rw:
        return Side.RIGHT
    if py == ry:
        return Side.TOP
    return Side.BOTTOM


def normalize_to_speed(dx: float, dy: float, speed: float) -> Point:
    magnitude = math.hypot(dx, dy)
    if magnitude == 0:
        return 0.0, -speed
    return dx / magnitude * speed, dy / magnitude * speed


__all__ = ["Side", "closest_point_on_rect", "circle_rect_overlap", "classify_hit_side", "normalize_to_speed"]

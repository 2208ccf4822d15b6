"""Deterministic block breaker simulation.

One ``tick`` advances the ball by its velocity and resolves, in fixed
order: walls, paddle, at most one block, bottom exit, victory. All
randomness (block colors, post-hit jitter) comes from the injected
``RNGService``; with a fixed seed and the same inputs two simulations
produce identical trajectories.

Block colors are drawn once at construction and reused by every
``reset`` so that a reset always reproduces the same board.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import List

from blockbreaker.config import GameConfig
from blockbreaker.constants import BLOCK_HIT_JITTER, PADDLE_MAX_DEFLECTION
from blockbreaker.entities import Ball, Block, Color, Paddle, build_blocks, random_block_color
from blockbreaker.geometry import (
    Side,
    circle_rect_overlap,
    classify_hit_side,
    closest_point_on_rect,
    normalize_to_speed,
)
from blockbreaker.logger import get_logger
from blockbreaker.rng_service import RNGService

log = get_logger("simulation")


@dataclass
class TickResult:
    """Events produced by a single tick (all False/empty for a no-op tick)."""

    advanced: bool = False
    wall_hit: bool = False
    paddle_hit: bool = False
    destroyed: List[int] = field(default_factory=list)  # indices into Simulation.blocks
    hit_side: Side | None = None
    life_lost: bool = False
    game_over: bool = False


class Simulation:
    def __init__(self, config: GameConfig | None = None, rng: RNGService | None = None):
        self.config = (config or GameConfig()).validate()
        if rng is None:
            seed = self.config.rng_seed
            if seed is None:
                seed = time.time_ns()
            rng = RNGService(seed)
        self.rng = rng
        self.palette: List[Color] = [random_block_color(self.rng) for _ in range(self.config.block_count)]

        self.ball: Ball
        self.paddle: Paddle
        self.blocks: List[Block] = []
        self.score = 0
        self.lives = self.config.initial_lives
        self.running = False
        self.over = False
        self.tick_count = 0
        self.reset()

    # Lifecycle -----------------------------------------------------
    def reset(self) -> None:
        cfg = self.config
        self.paddle = Paddle(cfg.field_width / 2, cfg.paddle_y, cfg.paddle_width, cfg.paddle_height)
        self.ball = Ball.spawn(self.paddle.x, cfg.ball_rest_y, cfg.ball_radius, cfg.ball_speed)
        self.blocks = build_blocks(cfg, self.palette)
        self.score = 0
        self.lives = cfg.initial_lives
        self.running = False
        self.over = False
        self.tick_count = 0
        log.debug("reset", f"blocks={len(self.blocks)}", f"lives={self.lives}")

    def start(self) -> None:
        if self.over:
            self.reset()
        self.running = True

    @property
    def idle(self) -> bool:
        return not self.running and not self.over

    # Input ---------------------------------------------------------
    def set_paddle_x(self, px: float) -> None:
        self.paddle.move_to(px, self.config.field_width)
        if self.idle:
            self.ball.x = self.paddle.x

    # Queries -------------------------------------------------------
    def active_blocks(self) -> List[Block]:
        return [b for b in self.blocks if b.active]

    @property
    def remaining_blocks(self) -> int:
        return sum(1 for b in self.blocks if b.active)

    @property
    def destroyed_blocks(self) -> int:
        return len(self.blocks) - self.remaining_blocks

    # Step ----------------------------------------------------------
    def tick(self) -> TickResult:
        result = TickResult()
        if not self.running or self.over:
            return result
        result.advanced = True
        self.tick_count += 1

        self.ball.move()
        result.wall_hit = self._reflect_walls()
        result.paddle_hit = self._reflect_paddle()
        self._collide_blocks(result)
        self._check_bottom_exit(result)

        if not any(b.active for b in self.blocks):
            self.over = True
            self.running = False
            log.info(f"Board cleared with score {self.score} and {self.lives} lives left")
        result.game_over = self.over
        return result

    def _reflect_walls(self) -> bool:
        ball = self.ball
        r = ball.radius
        hit = False
        if ball.x - r <= 0 or ball.x + r >= self.config.field_width:
            ball.dx = -ball.dx
            hit = True
        if ball.y - r <= 0:
            ball.dy = -ball.dy
            hit = True
        return hit

    def _reflect_paddle(self) -> bool:
        ball, paddle = self.ball, self.paddle
        r = ball.radius
        if not (
            ball.y + r >= paddle.y - paddle.half_height
            and ball.y - r <= paddle.y + paddle.half_height
            and paddle.x - paddle.half_width <= ball.x <= paddle.x + paddle.half_width
        ):
            return False
        # -1 at the left edge, +1 at the right edge
        hit_pos = (ball.x - paddle.x) / paddle.half_width
        angle = hit_pos * PADDLE_MAX_DEFLECTION
        ball.dy = -abs(ball.dy)
        speed = ball.speed
        ball.dx = speed * math.sin(angle)
        ball.dy = -speed * math.cos(angle)
        return True

    def _collide_blocks(self, result: TickResult) -> None:
        ball = self.ball
        for index, block in enumerate(self.blocks):
            if not block.active:
                continue
            bounds = block.bounds
            if not circle_rect_overlap(ball.x, ball.y, ball.radius, bounds):
                continue
            side = classify_hit_side(closest_point_on_rect(ball.x, ball.y, *bounds), bounds)
            block.deactivate()
            self.score += self.config.score_per_block
            jitter = self.rng.between(-BLOCK_HIT_JITTER, BLOCK_HIT_JITTER)
            if side.horizontal:
                ball.dx = -ball.dx
                ball.dy += jitter
            else:
                ball.dy = -ball.dy
                ball.dx += jitter
            ball.dx, ball.dy = normalize_to_speed(ball.dx, ball.dy, self.config.ball_speed)
            result.destroyed.append(index)
            result.hit_side = side
            log.debug("block", index, "hit on", side.value, "score", self.score)
            # one block per tick; neighbours resolve on later ticks
            break

    def _check_bottom_exit(self, result: TickResult) -> None:
        ball = self.ball
        if ball.y - ball.radius <= self.config.field_height:
            return
        self.lives = max(0, self.lives - 1)
        result.life_lost = True
        if self.lives == 0:
            self.over = True
            self.running = False
            log.info(f"Last life lost; game over with score {self.score}")
            return
        ball.rest_at(self.paddle.x, self.config.ball_rest_y, self.config.ball_speed)
        self.running = False
        log.info(f"Life lost; {self.lives} remaining")


__all__ = ["Simulation", "TickResult"]

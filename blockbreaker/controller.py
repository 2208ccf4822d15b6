"""Game controller.

Owns the ``Simulation`` and is the only object that mutates it. External
input (pointer motion, clicks, frame ticks) arrives through the ``on_*``
handlers; the presenter reads state through copies returned by the read
accessors or through ``render_model()``.

Phases:

    IDLE      running=False over=False   click -> PLAYING
    PLAYING   running=True  over=False   life lost -> IDLE / FINISHED, board cleared -> FINISHED
    FINISHED  running=False over=True    click -> reset, PLAYING
"""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import TYPE_CHECKING, List

from blockbreaker.config import GameConfig
from blockbreaker.entities import Ball, Block, Paddle
from blockbreaker.logger import get_logger
from blockbreaker.rng_service import RNGService
from blockbreaker.simulation import Simulation, TickResult

if TYPE_CHECKING:  # pragma: no cover
    from blockbreaker.render_model import RenderModel

_log = get_logger("controller")


class Phase(enum.Enum):
    IDLE = "Idle"
    PLAYING = "Playing"
    FINISHED = "Finished"


class Outcome(enum.Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    LOSS = "loss"


class GameController:
    def __init__(self, config: GameConfig | None = None, rng: RNGService | None = None):
        self._sim = Simulation(config, rng)
        self._phase = self._current_phase()

    # Inbound events ------------------------------------------------
    def on_pointer_move(self, x: float) -> None:
        self._sim.set_paddle_x(x)

    def on_click(self) -> None:
        self._sim.start()
        self._track_phase()

    def on_tick(self) -> TickResult:
        result = self._sim.tick()
        if result.advanced:
            self._track_phase()
        return result

    def reset(self) -> None:
        self._sim.reset()
        self._track_phase()

    # Read surface --------------------------------------------------
    @property
    def config(self) -> GameConfig:
        return self._sim.config

    @property
    def ball(self) -> Ball:
        return replace(self._sim.ball)

    @property
    def paddle(self) -> Paddle:
        return replace(self._sim.paddle)

    @property
    def blocks(self) -> List[Block]:
        return [replace(b) for b in self._sim.blocks]

    @property
    def score(self) -> int:
        return self._sim.score

    @property
    def lives(self) -> int:
        return self._sim.lives

    @property
    def running(self) -> bool:
        return self._sim.running

    @property
    def over(self) -> bool:
        return self._sim.over

    @property
    def ticks(self) -> int:
        return self._sim.tick_count

    @property
    def phase(self) -> Phase:
        return self._current_phase()

    @property
    def outcome(self) -> Outcome:
        if not self._sim.over:
            return Outcome.IN_PROGRESS
        return Outcome.WIN if self._sim.lives > 0 else Outcome.LOSS

    @property
    def simulation(self) -> Simulation:
        """Direct access for snapshots and tests; presenters should not use it."""
        return self._sim

    def render_model(self) -> "RenderModel":
        from blockbreaker.render_model import build_render_model

        return build_render_model(self)

    # Internals -----------------------------------------------------
    def _current_phase(self) -> Phase:
        if self._sim.over:
            return Phase.FINISHED
        return Phase.PLAYING if self._sim.running else Phase.IDLE

    def _track_phase(self) -> None:
        new_phase = self._current_phase()
        if new_phase is not self._phase:
            _log.debug("phase", self._phase.value, "->", new_phase.value)
            if new_phase is Phase.FINISHED:
                _log.info("finished:", self.outcome.value, "score", self._sim.score)
            self._phase = new_phase


__all__ = ["GameController", "Phase", "Outcome"]

"""Capture and restore complete simulation state, RNG included."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

from blockbreaker.simulation import Simulation


@dataclass
class BallSnapshot:
    x: float
    y: float
    dx: float
    dy: float


@dataclass
class BlockSnapshot:
    active: bool
    color: List[float]


@dataclass
class SimulationSnapshot:
    tick: int
    rng_state: Tuple[Any, ...]
    ball: BallSnapshot
    paddle_x: float
    blocks: List[BlockSnapshot] = field(default_factory=list)
    score: int = 0
    lives: int = 0
    running: bool = False
    over: bool = False


class SnapshotService:
    @staticmethod
    def capture(sim: Simulation, include_rng: bool = True) -> SimulationSnapshot:
        ball = sim.ball
        return SimulationSnapshot(
            tick=sim.tick_count,
            rng_state=sim.rng.get_state() if include_rng else (),
            ball=BallSnapshot(ball.x, ball.y, ball.dx, ball.dy),
            paddle_x=sim.paddle.x,
            blocks=[BlockSnapshot(b.active, list(b.color)) for b in sim.blocks],
            score=sim.score,
            lives=sim.lives,
            running=sim.running,
            over=sim.over,
        )

    @staticmethod
    def restore(sim: Simulation, snapshot: SimulationSnapshot) -> None:
        """Restore ``sim`` in place. The snapshot must come from the same config."""
        if len(snapshot.blocks) != len(sim.blocks):
            raise ValueError(f"snapshot has {len(snapshot.blocks)} blocks, simulation has {len(sim.blocks)}")
        # snapshots taken with include_rng=False leave the generator alone
        if snapshot.rng_state:
            sim.rng.set_state(snapshot.rng_state)

        sim.tick_count = snapshot.tick
        sim.score = snapshot.score
        sim.lives = snapshot.lives
        sim.running = snapshot.running
        sim.over = snapshot.over

        sim.paddle.x = snapshot.paddle_x
        sim.ball.x = snapshot.ball.x
        sim.ball.y = snapshot.ball.y
        sim.ball.dx = snapshot.ball.dx
        sim.ball.dy = snapshot.ball.dy

        sim.palette = [tuple(b.color) for b in snapshot.blocks]
        for block, b_snap in zip(sim.blocks, snapshot.blocks):
            block.active = b_snap.active
            block.color = tuple(b_snap.color)

    @staticmethod
    def serialize(snapshot: SimulationSnapshot) -> Dict[str, Any]:
        return asdict(snapshot)

    @staticmethod
    def deserialize(data: Dict[str, Any]) -> SimulationSnapshot:
        ball = BallSnapshot(**data["ball"])
        blocks = [BlockSnapshot(active=bool(b["active"]), color=list(b["color"])) for b in data.get("blocks", [])]

        # JSON turns the RNG state (version, internal_state, gauss_next) into
        # nested lists; random.setstate needs the tuples back.
        rng_state = data.get("rng_state")
        if isinstance(rng_state, list):
            rng_state = list(rng_state)
            if len(rng_state) >= 2 and isinstance(rng_state[1], list):
                rng_state[1] = tuple(rng_state[1])
            rng_state = tuple(rng_state)
        if rng_state is None:
            rng_state = ()

        return SimulationSnapshot(
            tick=data.get("tick", 0),
            rng_state=rng_state,
            ball=ball,
            paddle_x=data["paddle_x"],
            blocks=blocks,
            score=data.get("score", 0),
            lives=data.get("lives", 0),
            running=data.get("running", False),
            over=data.get("over", False),
        )


__all__ = ["SimulationSnapshot", "BallSnapshot", "BlockSnapshot", "SnapshotService"]

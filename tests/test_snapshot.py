import json

from blockbreaker.config import GameConfig
from blockbreaker.simulation import Simulation
from blockbreaker.snapshot import SnapshotService


def run(sim, ticks):
    trail = []
    for _ in range(ticks):
        if not sim.running:
            sim.start()
        sim.set_paddle_x(sim.ball.x)
        sim.tick()
        trail.append((sim.ball.x, sim.ball.y, sim.ball.dx, sim.ball.dy, sim.score, sim.lives))
    return trail


def test_restore_replays_identically():
    sim = Simulation(GameConfig(rng_seed=8))
    run(sim, 400)
    snap = SnapshotService.capture(sim)

    expected = run(sim, 600)
    SnapshotService.restore(sim, snap)
    assert sim.tick_count == snap.tick
    assert run(sim, 600) == expected


def test_serialized_snapshot_survives_json():
    sim = Simulation(GameConfig(rng_seed=8))
    run(sim, 300)
    data = json.loads(json.dumps(SnapshotService.serialize(SnapshotService.capture(sim))))
    expected = run(sim, 300)

    other = Simulation(GameConfig(rng_seed=99))
    SnapshotService.restore(other, SnapshotService.deserialize(data))
    assert [b.color for b in other.blocks] == [b.color for b in sim.blocks]
    assert run(other, 300) == expected


def test_capture_without_rng():
    sim = Simulation(GameConfig(rng_seed=8))
    snap = SnapshotService.capture(sim, include_rng=False)
    assert snap.rng_state == ()
    assert snap.lives == 3 and snap.score == 0
    assert len(snap.blocks) == 45 and all(b.active for b in snap.blocks)


def test_restore_without_rng_keeps_generator_state():
    sim = Simulation(GameConfig(rng_seed=8))
    snap = SnapshotService.capture(sim, include_rng=False)
    state = sim.rng.get_state()
    SnapshotService.restore(sim, snap)
    assert sim.rng.get_state() == state
    assert sim.lives == 3 and sim.tick_count == 0

import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, blockbreaker)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless / quiet test mode (must be set before blockbreaker.logger is imported)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("BLOCKBREAKER_LOG_LEVEL", "ERROR")

import pytest  # noqa: E402

from blockbreaker.config import GameConfig  # noqa: E402
from blockbreaker.simulation import Simulation  # noqa: E402


def place_ball(sim, x, y, dx, dy):
    sim.ball.x, sim.ball.y, sim.ball.dx, sim.ball.dy = x, y, dx, dy


@pytest.fixture
def playing_sim():
    """Default-config simulation with seed 1, already started."""
    sim = Simulation(GameConfig(rng_seed=1))
    sim.start()
    return sim

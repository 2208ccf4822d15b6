import random
from typing import Any

from blockbreaker.logger import get_logger

log = get_logger("rng")


class RNGService:
    """Seedable random source owned by a single simulation.

    Wraps a private ``random.Random`` so game randomness never touches the
    process-global generator.
    """

    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        log.info(f"RNG initialized with seed: {seed!r}")

    def between(self, low: float, high: float) -> float:
        """Return a float N with low <= N < high."""
        return low + (high - low) * self._generator.random()

    def get_state(self) -> tuple[Any, ...]:
        """Return an object capturing the current internal state of the generator."""
        return self._generator.getstate()

    def set_state(self, state: tuple[Any, ...]) -> None:
        """Restore the internal state of the generator from a previous get_state() call."""
        self._generator.setstate(state)

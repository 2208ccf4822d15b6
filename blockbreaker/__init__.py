"""Block Breaker: paddle-and-ball arcade game with a deterministic core."""

__version__ = "0.1.0"

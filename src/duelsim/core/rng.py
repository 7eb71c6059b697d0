"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random

PERCENTILE_MAX = 100


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def roll_percentile(self) -> int:
        """Return a fresh check roll in the inclusive range [0, 100]."""
        return self.randint(0, PERCENTILE_MAX)

"""Deterministic PRNG for reproducible point sets and benchmarks.

Use set_seed(n) before generating points for reproducibility.
Default (no seed) draws from an unseeded generator.
"""

import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, the generator is unseeded."""

    def __init__(self, seed=None):
        self._seed = seed
        self._rng = _random.Random(seed)

    @property
    def seed(self):
        return self._seed

    def random(self) -> float:
        return self._rng.random()


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = unseeded."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def get_seed() -> int | None:
    return _global_rng.seed


def random() -> float:
    return _global_rng.random()

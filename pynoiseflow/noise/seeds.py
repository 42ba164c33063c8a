"""Explicit random seeding for field construction and seed-point placement."""

from typing import Optional

import numpy as np

from .sources import SEED_MASK


class SeedSource:
    """
    Deterministic source of generator seeds and random positions.

    Wraps a private ``numpy.random.Generator``. With an explicit ``seed`` the
    whole sequence of seeds and positions is reproducible; with ``seed=None``
    the generator is drawn from OS entropy. No global random state is used.

    Args:
        seed: Optional root seed
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def next_seed(self) -> int:
        """Draw the next 32-bit generator seed."""
        return int(self.rng.integers(0, SEED_MASK, endpoint=True))

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def points(self, n: int, width: float, height: float) -> np.ndarray:
        """Draw ``n`` uniform points in [0, width) x [0, height); shape (n, 2)."""
        xs = self.rng.uniform(0.0, width, size=n)
        ys = self.rng.uniform(0.0, height, size=n)
        return np.column_stack([xs, ys])

    def __repr__(self):
        return f"SeedSource(seed={self.seed})"

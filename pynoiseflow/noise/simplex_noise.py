"""
Simplex noise generation for PyNoiseFlow.

Thin seeded wrapper around the ``opensimplex`` generator exposing the same
point / grid sampling interface as the Perlin generators.
"""

import numpy as np
from opensimplex import OpenSimplex


class SimplexNoise:
    """
    Seeded 2D OpenSimplex noise generator.

    Each instance owns its own ``OpenSimplex`` state, so generators never share
    the module-level seed of ``opensimplex``. Output is clamped to [-1, 1].
    """

    kind = "simplex"

    def __init__(self, seed: int = 0):
        self.seed = int(seed)
        self._gen = OpenSimplex(seed=self.seed)

    def sample(self, x: float, y: float) -> float:
        value = self._gen.noise2(float(x), float(y))
        return min(1.0, max(-1.0, value))

    def sample_grid(self, xs, ys) -> np.ndarray:
        """Sample on the grid spanned by 1D ``xs`` and ``ys``; shape (len(ys), len(xs))."""
        xs = np.atleast_1d(np.asarray(xs, dtype=np.float64))
        ys = np.atleast_1d(np.asarray(ys, dtype=np.float64))
        return np.clip(self._gen.noise2array(xs, ys), -1.0, 1.0)

    def __repr__(self):
        return f"SimplexNoise(seed={self.seed})"

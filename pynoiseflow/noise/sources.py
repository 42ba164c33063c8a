"""
Noise source selection for PyNoiseFlow.

Defines the ``NoiseSource`` capability shared by every generator and the
factory used by configuration and CLI code to build a generator from a kind
name and a seed.
"""

from typing import Protocol

import numpy as np

from .perlin_noise import FbmPerlinNoise, PerlinNoise
from .simplex_noise import SimplexNoise

NOISE_KINDS = ("simplex", "perlin", "fbm-perlin")

_GENERATORS = {
    "simplex": SimplexNoise,
    "perlin": PerlinNoise,
    "fbm-perlin": FbmPerlinNoise,
}

# Generators take 32-bit seeds
SEED_MASK = 0xFFFFFFFF


class NoiseSource(Protocol):
    """Anything that maps a 2D coordinate to a value in [-1, 1]."""

    def sample(self, x: float, y: float) -> float:
        ...

    def sample_grid(self, xs, ys) -> np.ndarray:
        ...


class ConstantNoise:
    """Noise source returning the same value everywhere."""

    kind = "constant"

    def __init__(self, value: float = 0.0):
        if not -1.0 <= value <= 1.0:
            raise ValueError(f"constant noise value must lie in [-1, 1], got {value}")
        self.value = float(value)

    def sample(self, x: float, y: float) -> float:
        return self.value

    def sample_grid(self, xs, ys) -> np.ndarray:
        return np.full((np.size(ys), np.size(xs)), self.value, dtype=np.float64)

    def __repr__(self):
        return f"ConstantNoise(value={self.value})"


def make_noise(kind: str, seed: int) -> NoiseSource:
    """
    Build a noise generator by name.

    Args:
        kind: One of ``NOISE_KINDS``
        seed: Generator seed, reduced to 32 bits

    Returns:
        NoiseSource: A freshly seeded generator

    Raises:
        ValueError: If ``kind`` is not a known generator
    """
    try:
        cls = _GENERATORS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown noise kind '{kind}', expected one of {', '.join(NOISE_KINDS)}"
        ) from None
    return cls(int(seed) & SEED_MASK)

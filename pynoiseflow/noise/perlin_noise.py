"""
Perlin noise generation for PyNoiseFlow.

Provides seeded 2D Perlin noise built on a Fisher-Yates permutation table and
an 8-direction gradient table. Evaluation is vectorized with numpy so the same
code serves single-point sampling (flow integration) and whole-image sampling
(noise previews, flow backgrounds).
"""

import numpy as np


def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Args:
        seed: Random seed for reproducible permutation

    Returns:
        512-element permutation array (256 values duplicated)
    """
    rng = np.random.default_rng(seed)

    # Create initial sequence [0, 1, 2, ..., 255]
    perm = np.arange(256, dtype=np.int64)

    # Fisher-Yates shuffle
    for i in range(255, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    # Duplicate to 512 elements for easier wrapping
    return np.concatenate([perm, perm])


# 8-direction 2D gradient vectors
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],  # Diagonal gradients
    [1, 0], [-1, 0], [0, 1], [0, -1]      # Axis-aligned gradients
], dtype=np.float64)


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t, a, b):
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


def grad(hash_val, dx, dy, gradients=GRADIENTS_2D):
    """Compute dot product of gradient vector and distance vector"""
    idx = hash_val & 7  # Use lower 3 bits to select from 8 gradients
    return gradients[idx, 0] * dx + gradients[idx, 1] * dy


def perlin_noise_at(x, y, perm: np.ndarray, gradients: np.ndarray = GRADIENTS_2D):
    """
    Evaluate Perlin noise at the given coordinates.

    Args:
        x, y: Coordinates for noise evaluation (scalars or broadcastable arrays)
        perm: 512-element permutation table
        gradients: 8x2 gradient vector table

    Returns:
        numpy.ndarray: Perlin noise values, in range approximately [-1, 1]
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    x, y = np.broadcast_arrays(x, y)

    # Find unit grid cell containing point
    x0 = np.floor(x)
    y0 = np.floor(y)
    X = x0.astype(np.int64) & 255
    Y = y0.astype(np.int64) & 255

    # Find relative x,y of point in cell
    x = x - x0
    y = y - y0

    u = fade(x)
    v = fade(y)

    # Hash coordinates of the 4 cell corners
    A = perm[X] + Y
    B = perm[(X + 1) & 255] + Y
    AA = perm[A & 255]
    AB = perm[(A + 1) & 255]
    BA = perm[B & 255]
    BB = perm[(B + 1) & 255]

    return lerp(v,
                lerp(u, grad(AA, x, y, gradients), grad(BA, x - 1, y, gradients)),
                lerp(u, grad(AB, x, y - 1, gradients), grad(BB, x - 1, y - 1, gradients)))


class PerlinNoise:
    """
    Seeded 2D Perlin noise generator.

    Output is clamped to [-1, 1]. Two generators built from the same seed
    produce identical values everywhere.
    """

    kind = "perlin"

    def __init__(self, seed: int = 0):
        self.seed = int(seed)
        self._perm = fisher_yates_permutation(self.seed)

    def _evaluate(self, x, y):
        return np.clip(perlin_noise_at(x, y, self._perm), -1.0, 1.0)

    def sample(self, x: float, y: float) -> float:
        return float(self._evaluate(x, y))

    def sample_grid(self, xs, ys) -> np.ndarray:
        """Sample on the grid spanned by 1D ``xs`` and ``ys``; shape (len(ys), len(xs))."""
        X, Y = np.meshgrid(np.asarray(xs, dtype=np.float64),
                           np.asarray(ys, dtype=np.float64), indexing="xy")
        return self._evaluate(X, Y)

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed})"


class FbmPerlinNoise(PerlinNoise):
    """
    Fractal Brownian motion over Perlin noise.

    Sums ``octaves`` layers of Perlin noise sharing one permutation table, each
    at ``lacunarity`` times the previous frequency and ``persistence`` times
    the previous amplitude, normalized back to [-1, 1].

    Args:
        seed: Random seed for the permutation table
        octaves: Number of noise layers to combine (default: 6)
        persistence: Amplitude ratio between octaves (default: 0.5)
        lacunarity: Frequency ratio between octaves (default: 2.0)
    """

    kind = "fbm-perlin"

    def __init__(self, seed: int = 0, octaves: int = 6, persistence: float = 0.5,
                 lacunarity: float = 2.0):
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        super().__init__(seed)
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)

    def _evaluate(self, x, y):
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        total = 0.0
        max_value = 0.0
        current_amplitude = 1.0
        current_frequency = 1.0

        for _ in range(self.octaves):
            total = total + perlin_noise_at(x * current_frequency, y * current_frequency,
                                            self._perm) * current_amplitude
            max_value += current_amplitude

            current_amplitude *= self.persistence
            current_frequency *= self.lacunarity

        if max_value > 0.0:
            total = total / max_value
        return np.clip(total, -1.0, 1.0)

    def __repr__(self):
        return (f"{type(self).__name__}(seed={self.seed}, octaves={self.octaves}, "
                f"persistence={self.persistence}, lacunarity={self.lacunarity})")

"""
Noise generation module for PyNoiseFlow.

Provides seeded 2D noise generators and the scalar / vector fields built on
top of them. All generators are deterministic for a given seed and return
values in [-1, 1]; every generator supports both single-point sampling and
vectorized grid sampling.

Noise Types:
- Simplex: OpenSimplex gradient noise (via the ``opensimplex`` package)
- Perlin: Permutation-table Perlin noise with 8 gradient directions
- FBM Perlin: Several Perlin octaves summed with decaying amplitude

Fields:
- ScalarNoiseField: one generator, positions divided by a scale factor
- Noise2x2: two independent channels forming a biased, optionally
  normalized flow vector

Usage:
    import pynoiseflow as nf

    seeds = nf.noise.SeedSource(42)

    # Height field varying over ~200 pixels
    height = nf.noise.ScalarNoiseField.from_seed("perlin", seeds.next_seed(), scale=200.0)
    h = height.sample((10.0, 20.0))

    # Flow field with a constant drift towards the bottom right
    flow = nf.noise.Noise2x2.from_seeds(seeds, pos_scale=100.0, normalize=True,
                                        bias=(0.4, 0.4))
"""

from .perlin_noise import PerlinNoise, FbmPerlinNoise, fisher_yates_permutation, perlin_noise_at
from .simplex_noise import SimplexNoise
from .sources import NOISE_KINDS, ConstantNoise, NoiseSource, make_noise
from .seeds import SeedSource
from .fields import ScalarNoiseField, Noise2x2

# Export all noise generation classes and functions
__all__ = [
    "PerlinNoise", "FbmPerlinNoise", "SimplexNoise", "ConstantNoise",
    "fisher_yates_permutation", "perlin_noise_at",
    "NOISE_KINDS", "NoiseSource", "make_noise",
    "SeedSource",
    "ScalarNoiseField", "Noise2x2",
]

"""
Scalar and vector noise fields for PyNoiseFlow.

A ``ScalarNoiseField`` maps pixel coordinates into noise space and samples one
generator. A ``Noise2x2`` combines two independent scalar fields into a 2D flow
vector with an optional normalization step and a constant drift (bias).

Coordinate convention: scale factors DIVIDE pixel coordinates, so a field with
``scale=100`` varies over roughly 100 pixels::

    ScalarNoiseField.sample(p) = generator(p / scale)
    Noise2x2.sample(p)         = normalize?(Nx(p / pos_scale), Ny(p / pos_scale)) + bias

Usage:
    import pynoiseflow as nf

    seeds = nf.noise.SeedSource(42)
    flow = nf.noise.Noise2x2.from_seeds(seeds, pos_scale=100.0, normalize=True,
                                        bias=(0.4, 0.4))
    direction = flow.sample((120.0, 80.0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np

from .seeds import SeedSource
from .sources import NoiseSource, make_noise


@dataclass(frozen=True)
class ScalarNoiseField:
    """
    One noise generator sampled at scaled positions.

    Attributes:
        source: Generator implementing ``NoiseSource``
        scale: Positive divisor applied to positions before sampling
    """

    source: NoiseSource
    scale: float = 1.0

    def __post_init__(self):
        if not self.scale > 0.0:
            raise ValueError(f"Noise field scale must be positive, got {self.scale}")

    @classmethod
    def from_seed(cls, kind: str, seed: int, scale: float = 1.0) -> "ScalarNoiseField":
        return cls(make_noise(kind, seed), scale)

    def sample(self, position: Sequence[float]) -> float:
        """Return the field value in [-1, 1] at ``position`` (x, y)."""
        x, y = position
        return self.source.sample(x / self.scale, y / self.scale)

    def sample_grid(self, xs, ys) -> np.ndarray:
        """Sample over pixel coordinates ``xs`` x ``ys``; shape (len(ys), len(xs))."""
        xs = np.asarray(xs, dtype=np.float64) / self.scale
        ys = np.asarray(ys, dtype=np.float64) / self.scale
        return self.source.sample_grid(xs, ys)

    def sample_unit(self, position: Sequence[float]) -> float:
        """Field value remapped from [-1, 1] to [0, 1]."""
        return (self.sample(position) + 1.0) / 2.0


@dataclass(frozen=True, eq=False)
class Noise2x2:
    """
    Two-channel noise field producing 2D flow vectors.

    The bias is added after normalization, so with ``normalize=True`` the output
    has unit length only when ``bias`` is zero. A zero raw vector is left as
    zero before the bias is applied.

    Attributes:
        noise_x: Field for the x component
        noise_y: Field for the y component
        pos_scale: Positions are divided by this value before sampling
        normalize: Scale non-zero raw vectors to unit length
        bias: Constant drift added to every sample
    """

    noise_x: ScalarNoiseField
    noise_y: ScalarNoiseField
    pos_scale: float = 1.0
    normalize: bool = False
    bias: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        if not self.pos_scale > 0.0:
            raise ValueError(f"pos_scale must be positive, got {self.pos_scale}")
        bias = np.array(self.bias, dtype=np.float64).reshape(2)
        bias.setflags(write=False)
        object.__setattr__(self, "bias", bias)

    @classmethod
    def from_seeds(cls, seeds: SeedSource, kind: str = "simplex", pos_scale: float = 1.0,
                   normalize: bool = False, bias: Tuple[float, float] = (0.0, 0.0)) -> "Noise2x2":
        """Build both channels from the next two seeds of ``seeds``."""
        noise_x = ScalarNoiseField.from_seed(kind, seeds.next_seed())
        noise_y = ScalarNoiseField.from_seed(kind, seeds.next_seed())
        return cls(noise_x, noise_y, pos_scale=pos_scale, normalize=normalize, bias=bias)

    def sample(self, position: Sequence[float]) -> np.ndarray:
        """Return the flow vector at ``position`` as a float64 array of shape (2,)."""
        x, y = position
        p = (x / self.pos_scale, y / self.pos_scale)
        out = np.array([self.noise_x.sample(p), self.noise_y.sample(p)], dtype=np.float64)
        if self.normalize:
            norm = math.hypot(out[0], out[1])
            if norm > 0.0:
                out = out / norm
        return out + self.bias

    def sample_grid(self, xs, ys) -> np.ndarray:
        """Vectorized ``sample`` over ``xs`` x ``ys``; shape (len(ys), len(xs), 2)."""
        xs = np.asarray(xs, dtype=np.float64) / self.pos_scale
        ys = np.asarray(ys, dtype=np.float64) / self.pos_scale
        out = np.stack([self.noise_x.sample_grid(xs, ys),
                        self.noise_y.sample_grid(xs, ys)], axis=-1)
        if self.normalize:
            norm = np.hypot(out[..., 0], out[..., 1])[..., None]
            out = np.divide(out, norm, out=out.copy(), where=norm > 0.0)
        return out + self.bias

"""
Palette resolvers for PyNoiseFlow.

Both resolvers map a scalar value (normally a noise sample remapped to
[0, 1]) to a ``Color``:

- DiscretePalette: ``index = clamp(floor(value * n), 0, n - 1)``
- GradientPalette: per-channel linear interpolation between the two stops
  bracketing ``value``, clamped to the end colors

Empty palettes are rejected when the resolver is built, never when it is used.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Protocol, Sequence

import matplotlib
import numpy as np

from .colors import Color


class PaletteResolver(Protocol):
    def resolve(self, value: float) -> Color:
        ...


class DiscretePalette:
    """
    Ordered list of colors indexed by a value in [0, 1).

    Values at or above 1 select the last color and negative values the first.

    Args:
        colors: At least one ``Color`` (or RGBA tuple of floats)

    Raises:
        ValueError: If ``colors`` is empty
    """

    def __init__(self, colors: Iterable[Sequence[float]]):
        self.colors = tuple(Color(*c) for c in colors)
        if not self.colors:
            raise ValueError("Palette must contain at least one color")

    def __len__(self):
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    def __getitem__(self, index):
        return self.colors[index]

    def __eq__(self, other):
        return isinstance(other, DiscretePalette) and self.colors == other.colors

    def __repr__(self):
        return f"DiscretePalette([{', '.join(c.to_hex() for c in self.colors)}])"

    def index_of(self, value: float) -> int:
        n = len(self.colors)
        if math.isnan(value):
            return 0
        scaled = value * n
        if scaled >= n:
            return n - 1
        if scaled <= 0.0:
            return 0
        return int(math.floor(scaled))

    def resolve(self, value: float) -> Color:
        return self.colors[self.index_of(value)]

    def resolve_array(self, values) -> np.ndarray:
        """Vectorized ``resolve``; returns float RGBA of shape values.shape + (4,)."""
        n = len(self.colors)
        values = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0)
        index = np.clip(np.floor(values * n), 0, n - 1).astype(np.int64)
        return np.array(self.colors, dtype=np.float64)[index]

    def random_color(self, rng: np.random.Generator) -> Color:
        """Pick a color uniformly at random."""
        return self.colors[int(rng.integers(0, len(self.colors)))]


class GradientStop(NamedTuple):
    position: float
    color: Color


class GradientPalette:
    """
    Continuous color gradient through ordered stops.

    Args:
        stops: ``GradientStop`` (or ``(position, color)``) pairs with weakly
            increasing positions, conceptually covering [0, 1]

    Raises:
        ValueError: If ``stops`` is empty or positions decrease
    """

    def __init__(self, stops: Iterable[Sequence]):
        self.stops = tuple(GradientStop(float(p), Color(*c)) for p, c in stops)
        if not self.stops:
            raise ValueError("Gradient must contain at least one stop")
        self._positions = np.array([s.position for s in self.stops], dtype=np.float64)
        if np.any(np.diff(self._positions) < 0.0):
            raise ValueError(
                f"Gradient stop positions must be weakly increasing, got {self._positions.tolist()}"
            )
        self._channels = np.array([s.color for s in self.stops], dtype=np.float64).T

    @classmethod
    def from_colors(cls, colors: Sequence[Sequence[float]]) -> "GradientPalette":
        """Evenly spaced stops over [0, 1], first color at 0 and last at 1."""
        colors = list(colors)
        if not colors:
            raise ValueError("Gradient must contain at least one stop")
        if len(colors) == 1:
            return cls([(0.0, colors[0])])
        positions = np.linspace(0.0, 1.0, len(colors))
        return cls(zip(positions.tolist(), colors))

    @classmethod
    def from_colormap(cls, name: str, n_stops: int = 16) -> "GradientPalette":
        """Sample a matplotlib colormap (e.g. ``"viridis"``) into ``n_stops`` stops."""
        if n_stops < 2:
            raise ValueError(f"n_stops must be at least 2, got {n_stops}")
        try:
            cmap = matplotlib.colormaps[name]
        except KeyError:
            raise ValueError(f"Unknown matplotlib colormap '{name}'") from None
        positions = np.linspace(0.0, 1.0, n_stops)
        return cls(zip(positions.tolist(), (tuple(c) for c in cmap(positions))))

    def __len__(self):
        return len(self.stops)

    def __repr__(self):
        stops = ", ".join(f"{s.position:g}:{s.color.to_hex()}" for s in self.stops)
        return f"GradientPalette([{stops}])"

    def resolve(self, value: float) -> Color:
        if math.isnan(value):
            value = self._positions[0]
        return Color(*(float(np.interp(value, self._positions, channel))
                       for channel in self._channels))

    def resolve_array(self, values) -> np.ndarray:
        """Vectorized ``resolve``; returns float RGBA of shape values.shape + (4,)."""
        values = np.asarray(values, dtype=np.float64)
        values = np.where(np.isnan(values), self._positions[0], values)
        return np.stack([np.interp(values, self._positions, channel)
                         for channel in self._channels], axis=-1)

    def random_color(self, rng: np.random.Generator) -> Color:
        """Resolve a uniformly drawn position between the first and last stop."""
        return self.resolve(float(rng.uniform(self._positions[0], self._positions[-1])))

    def take(self, n: int) -> DiscretePalette:
        """``n`` evenly spaced colors from the first to the last stop, both included."""
        if n < 1:
            raise ValueError(f"Cannot take {n} colors from a gradient")
        if n == 1:
            return DiscretePalette([self.stops[0].color])
        positions = np.linspace(self._positions[0], self._positions[-1], n)
        return DiscretePalette(self.resolve(float(p)) for p in positions)

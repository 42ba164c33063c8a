"""
Triangle tessellation of a rectangular canvas.

Every grid anchor ``(i, j)`` carries two equilateral triangles of side ``s``
and height ``h = s * sin(60°)``::

    upright:  a, a + (s, 0), a + (s/2, h)
    inverted: a, a + (s/2, h), a + (-s/2, h)

With anchors ``x = i * s`` (shifted by ``s/2`` on odd rows when staggered) and
``y = j * h``, the cells tile the plane row by row without gaps or overlaps.
``i`` starts at ``-margin`` so the left edge is covered on shifted rows, and
both ranges extend ``margin`` cells past the canvas so partial edge triangles
are included.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

import numpy as np

Point = Tuple[float, float]

SIN_60 = math.sin(math.radians(60.0))


class Orientation(str, Enum):
    UPRIGHT = "upright"
    INVERTED = "inverted"


@dataclass(frozen=True)
class TriangleCell:
    """One triangle of the tessellation."""

    i: int
    j: int
    orientation: Orientation
    anchor: Point
    vertices: Tuple[Point, Point, Point]

    @property
    def centroid(self) -> Point:
        xs, ys = zip(*self.vertices)
        return (sum(xs) / 3.0, sum(ys) / 3.0)

    @property
    def area(self) -> float:
        (x0, y0), (x1, y1), (x2, y2) = self.vertices
        return abs((x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)) / 2.0


class TessellationGridWalker:
    """
    Enumerate triangle cells covering a ``width`` x ``height`` canvas.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        side: Triangle side length in pixels
        margin: Extra anchors past each edge (default: 1)
        stagger: Shift odd rows by half a side so vertices form a regular
            triangular lattice (default: True)

    Raises:
        ValueError: If a size is not positive or ``margin`` is negative
    """

    def __init__(self, width: float, height: float, side: float, margin: int = 1,
                 stagger: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if side <= 0:
            raise ValueError(f"Triangle side must be positive, got {side}")
        if margin < 0:
            raise ValueError(f"margin must be non-negative, got {margin}")
        self.width = width
        self.height = height
        self.side = float(side)
        self.half_side = self.side / 2.0
        self.triangle_height = self.side * SIN_60
        self.margin = int(margin)
        self.stagger = stagger

        self.i_max = math.ceil(width / self.side) + self.margin
        self.j_max = math.ceil(height / self.triangle_height) + self.margin

    @property
    def i_range(self) -> range:
        return range(-self.margin, self.i_max)

    @property
    def j_range(self) -> range:
        return range(0, self.j_max)

    def __len__(self):
        return 2 * len(self.i_range) * len(self.j_range)

    def anchor(self, i: int, j: int) -> Point:
        x = i * self.side
        if self.stagger and j % 2 == 1:
            x += self.half_side
        return (x, j * self.triangle_height)

    def cells_at(self, i: int, j: int) -> Tuple[TriangleCell, TriangleCell]:
        """The upright and inverted triangles sharing anchor ``(i, j)``."""
        ax, ay = self.anchor(i, j)
        s, hs, h = self.side, self.half_side, self.triangle_height
        upright = TriangleCell(
            i, j, Orientation.UPRIGHT, (ax, ay),
            ((ax, ay), (ax + s, ay), (ax + hs, ay + h)),
        )
        inverted = TriangleCell(
            i, j, Orientation.INVERTED, (ax, ay),
            ((ax, ay), (ax + hs, ay + h), (ax - hs, ay + h)),
        )
        return upright, inverted

    def __iter__(self) -> Iterator[TriangleCell]:
        for i in self.i_range:
            for j in self.j_range:
                yield from self.cells_at(i, j)

    def vertices_array(self) -> np.ndarray:
        """All cell vertices in iteration order; shape (len(self), 3, 2)."""
        return np.array([cell.vertices for cell in self], dtype=np.float64).reshape(-1, 3, 2)

"""Start positions for tails and walks."""

import math

import numpy as np

from ..noise.seeds import SeedSource


def grid_points(width: float, height: float, stride: float, first: int = 1,
                include_edge: bool = False) -> np.ndarray:
    """
    Regular grid of positions ``(i * stride, j * stride)`` inside the canvas.

    ``i`` runs from ``first`` up to ``width // stride`` (exclusive) in the outer
    loop, ``j`` likewise over the height. With ``include_edge`` the ranges end
    at ``ceil(width / stride)`` instead, so every multiple of ``stride`` below
    the canvas size is used. Returns an array of shape (n, 2).
    """
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")
    if include_edge:
        n_i = math.ceil(width / stride)
        n_j = math.ceil(height / stride)
    else:
        n_i = int(width // stride)
        n_j = int(height // stride)
    points = [(i * stride, j * stride) for i in range(first, n_i) for j in range(first, n_j)]
    return np.array(points, dtype=np.float64).reshape(-1, 2)


def random_points(seeds: SeedSource, n: int, width: float, height: float) -> np.ndarray:
    """``n`` uniformly distributed start positions in [0, width) x [0, height)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return seeds.points(n, width, height)

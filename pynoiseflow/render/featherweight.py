"""
Featherweight renderer: Perlin flow drawn pixel by pixel on a black square.

Layers, each optional:
- flow background: red and green channels from the x and y flow components
- tails: straight segments on a regular grid, colored by the local vector
- walks: white Euler traces from random start points
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import numpy as np

from ..config import FeatherweightConfig
from ..flow import grid_points, random_points, tail, trace
from ..noise import Noise2x2, SeedSource
from ..palette import BLACK, WHITE, Color
from ..raster import Canvas
from ._progress import Progress, no_progress


def vector_color(vector) -> Color:
    """Red from the x component, green from the y component, both mapped from [-1, 1]."""
    vx, vy = np.clip(vector, -1.0, 1.0)
    return Color((vx + 1.0) / 2.0, (vy + 1.0) / 2.0, 0.0)


def flow_background(flow: Noise2x2, size: int) -> np.ndarray:
    """(size, size, 3) float image of the raw flow field."""
    coords = np.arange(size)
    vectors = np.clip(flow.sample_grid(coords, coords), -1.0, 1.0)
    rgb = np.zeros((size, size, 3), dtype=np.float64)
    rgb[..., :2] = (vectors + 1.0) / 2.0
    return rgb


def render_featherweight(config: FeatherweightConfig, seeds: Optional[SeedSource] = None,
                         progress: Progress = no_progress) -> Canvas:
    seeds = seeds if seeds is not None else SeedSource()
    size = config.size
    canvas = Canvas(size, size, BLACK)
    bounds = (size, size)

    flow = Noise2x2.from_seeds(seeds, kind=config.noise, pos_scale=config.pos_scale)

    if config.draw_flow_bg:
        canvas.blit(flow_background(flow, size))

    if config.draw_tails:
        for start in grid_points(size, size, config.tail_stride, first=0,
                                 include_edge=True):
            path = tail(flow, start, config.tail_length)
            canvas.stroke_path(path.points, vector_color(flow.sample(start)))

    if config.draw_walks:
        walk_field = replace(flow, normalize=True) if config.walk_normalize else flow
        starts = random_points(seeds, config.walk_count, size, size)
        for start in progress(starts, len(starts), "Tracing walks"):
            path = trace(walk_field, start, config.walk_length, bounds=bounds)
            for x, y in path.points:
                canvas.set_pixel(x, y, WHITE)

    return canvas

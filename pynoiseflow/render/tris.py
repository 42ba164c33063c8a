"""
Triangle renderer: a tessellated canvas colored from a palette.

Each triangle is colored on its own. In ``noise`` mode the height field is
sampled at the triangle's centroid, so the two triangles sharing an anchor
usually get different colors.
"""

from __future__ import annotations

from typing import Optional

from ..config import TrisConfig
from ..grid import TessellationGridWalker
from ..noise import ScalarNoiseField, SeedSource
from ..palette import WHITE, get_default_palette
from ..raster import Canvas
from ._progress import Progress, no_progress

DEFAULT_TRIS_PALETTE = "golden-haze"


def render_noise_tris(config: TrisConfig, seeds: Optional[SeedSource] = None,
                      progress: Progress = no_progress) -> Canvas:
    """Fill the canvas with triangles colored by noise height or at random."""
    seeds = seeds if seeds is not None else SeedSource()
    palette = config.palette if config.palette is not None else get_default_palette(DEFAULT_TRIS_PALETTE)
    canvas = Canvas(config.canvas.width, config.canvas.height, WHITE)

    walker = TessellationGridWalker(canvas.width, canvas.height, config.side,
                                    stagger=config.stagger)
    height = ScalarNoiseField.from_seed(config.noise, seeds.next_seed(), scale=config.scale)

    for cell in progress(walker, len(walker), "Drawing triangles"):
        if config.color_mode == "noise":
            color = palette.resolve(height.sample_unit(cell.centroid))
        else:
            color = palette.random_color(seeds.rng)
        canvas.fill_polygon(cell.vertices, color)

    return canvas

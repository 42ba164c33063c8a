"""
Flow renderer: tails and curved walks through a biased 2D noise field.

Walk colors come from a second, much coarser simplex field: the palette index
of a walk is ``floor(color_noise(start) * color_range)`` clamped to the
palette, so neighbouring walks share colors in large patches.
"""

from __future__ import annotations

from typing import Optional

from ..config import FlowConfig
from ..constants import TAIL_WIDTH, WALK_SAMPLES_PER_SEGMENT
from ..flow import grid_points, random_points, tail, walk
from ..noise import Noise2x2, ScalarNoiseField, SeedSource
from ..palette import BLUE, WHITE, Color, DiscretePalette, GradientPalette
from ..raster import Canvas
from ._progress import Progress, no_progress


def walk_palette(config: FlowConfig) -> DiscretePalette:
    if config.palette is not None:
        return config.palette
    return GradientPalette.from_colors(config.gradient).take(config.walk_palette_size)


def walk_color(color_noise: ScalarNoiseField, palette: DiscretePalette, position,
               color_range: float) -> Color:
    """Palette color at index ``floor(color_noise(position) * color_range)``, clamped."""
    return palette.resolve(color_noise.sample(position) * color_range / len(palette))


def draw_tails(canvas: Canvas, flow: Noise2x2, config: FlowConfig):
    """Blue tail with a small source circle at every grid point."""
    for start in grid_points(canvas.width, canvas.height, config.tail_stride):
        path = tail(flow, start, config.tail_length)
        canvas.stroke_circle(start, config.tail_length / 8.0, BLUE, TAIL_WIDTH)
        canvas.stroke_path(path.points, BLUE, TAIL_WIDTH)


def draw_walks(canvas: Canvas, flow: Noise2x2, seeds: SeedSource, config: FlowConfig,
               progress: Progress = no_progress):
    palette = walk_palette(config)
    color_noise = ScalarNoiseField.from_seed("simplex", seeds.next_seed(),
                                             scale=config.scale * config.color_scale)
    starts = random_points(seeds, config.n_walks, canvas.width, canvas.height)
    for start in progress(starts, len(starts), "Drawing walks"):
        color = walk_color(color_noise, palette, start, config.color_range)
        path = walk(flow, start, config.walk_steps, config.step_size, bounds=canvas.size)
        canvas.stroke_path(path.polyline(WALK_SAMPLES_PER_SEGMENT), color, config.walk_width)


def render_flow(config: FlowConfig, seeds: Optional[SeedSource] = None,
                progress: Progress = no_progress) -> Canvas:
    """
    Render flow tails and/or walks on a white canvas.

    Args:
        config: Flow parameters
        seeds: Seed source (default: fresh entropy)
        progress: Optional wrapper reporting loop progress

    Returns:
        Canvas: The rendered image
    """
    seeds = seeds if seeds is not None else SeedSource()
    canvas = Canvas(config.canvas.width, config.canvas.height, WHITE)

    flow = Noise2x2.from_seeds(seeds, kind=config.noise, pos_scale=config.scale,
                               normalize=config.normalize, bias=config.bias)

    if config.draw_tails:
        draw_tails(canvas, flow, config)

    if config.draw_walks:
        draw_walks(canvas, flow, seeds, config, progress)

    return canvas

"""
Renderers for PyNoiseFlow.

Each renderer takes a configuration dataclass and a ``SeedSource`` and returns
a ``Canvas``; saving is left to the caller.

Available Renderers:
- render_flow: flow tails and cubic walks colored by a coarse noise field
- render_noise_tris: triangle tessellation colored by noise or at random
- render_noise_image: grayscale (or palette) preview of a scalar field
- render_featherweight: pixel-level flow background, tails and traces

Usage:
    import pynoiseflow as nf

    config = nf.config.FlowConfig(n_walks=200)
    canvas = nf.render.render_flow(config, nf.noise.SeedSource(42))
    canvas.save("flow.png")
"""

from .flow import render_flow, walk_color, walk_palette
from .tris import render_noise_tris
from .preview import noise_to_gray, render_noise_image
from .featherweight import render_featherweight, vector_color

__all__ = [
    "render_flow", "walk_color", "walk_palette",
    "render_noise_tris",
    "noise_to_gray", "render_noise_image",
    "render_featherweight", "vector_color",
]

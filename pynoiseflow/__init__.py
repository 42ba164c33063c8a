"""
PyNoiseFlow: procedural images from noise fields.

Samples seeded scalar and vector noise fields, follows the resulting flow
with path integrators, tessellates the canvas into triangles and resolves
colors from palettes or gradients.

Submodules:
- noise: generators, SeedSource, ScalarNoiseField and Noise2x2
- palette: colors, discrete and gradient palettes, hex palette files
- flow: tail / walk / trace integrators and start positions
- grid: triangle tessellation
- raster: Pillow canvas
- render: complete renderers built from the pieces above
- config / constants: render parameters and defaults
- cli: click commands (pnf-flow, pnf-tris, pnf-noise, pnf-featherweight, pnf-palette)

Usage:
    import pynoiseflow as nf

    seeds = nf.noise.SeedSource(42)
    field = nf.noise.Noise2x2.from_seeds(seeds, pos_scale=100.0, normalize=True)
    path = nf.flow.tail(field, (100.0, 100.0), 16.0)
"""

__version__ = "0.1.0"

from . import constants
from . import noise
from . import palette
from . import flow
from . import grid
from . import raster
from . import config
from . import render

__all__ = [
    "__version__",
    "constants", "noise", "palette", "flow", "grid", "raster", "config", "render", "cli",
]


def __getattr__(name):
    if name == "cli":
        import importlib
        mod = importlib.import_module(".cli", __name__)
        globals()[name] = mod
        return mod
    raise AttributeError(name)

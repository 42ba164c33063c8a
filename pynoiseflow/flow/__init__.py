"""
Flow integration submodule for PyNoiseFlow.

Turns a ``Noise2x2`` flow field into drawable paths.

Core Modules:
- integrators: tail, walk (cubic curves) and trace (Euler steps) producing
  immutable FlowPath objects
- seeding: regular grid and uniform random start positions

Usage:
    import pynoiseflow as nf

    seeds = nf.noise.SeedSource(7)
    field = nf.noise.Noise2x2.from_seeds(seeds, pos_scale=100.0, normalize=True)

    for start in nf.flow.random_points(seeds, 100, 800, 600):
        path = nf.flow.walk(field, start, n_steps=200, step_size=4.0, bounds=(800, 600))
        vertices = path.polyline()
"""

from .integrators import CUBIC, LINE, FlowPath, in_bounds, tail, trace, walk
from .seeding import grid_points, random_points

__all__ = [
    "CUBIC", "LINE", "FlowPath", "in_bounds", "tail", "trace", "walk",
    "grid_points", "random_points",
]

"""
Grid module for PyNoiseFlow.

Provides the triangle tessellation used by the triangle renderers.

Usage:
    import pynoiseflow as nf

    walker = nf.grid.TessellationGridWalker(800, 600, side=32.0)
    for cell in walker:
        cx, cy = cell.centroid
"""

from .tessellation import SIN_60, Orientation, TessellationGridWalker, TriangleCell

__all__ = ["SIN_60", "Orientation", "TessellationGridWalker", "TriangleCell"]

"""
Raster output for PyNoiseFlow.

Available Components:
- Canvas: Pillow RGBA image with pixel, stroke and fill primitives
"""

from .canvas import Canvas

__all__ = ["Canvas"]

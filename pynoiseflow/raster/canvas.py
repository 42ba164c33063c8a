"""
Raster canvas for PyNoiseFlow renderers.

Wraps a Pillow RGBA image with the handful of drawing primitives the
renderers need: pixel writes, array blits, polyline strokes, circle outlines
and polygon fills. A canvas is owned by a single renderer at a time.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..palette.colors import WHITE, Color


def _xy_list(points) -> list:
    return [(float(x), float(y)) for x, y in np.asarray(points, dtype=np.float64).reshape(-1, 2)]


class Canvas:
    """
    Pillow-backed RGBA drawing surface.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        background: Initial fill color (default: white)

    Raises:
        ValueError: If ``width`` or ``height`` is not positive
    """

    def __init__(self, width: int, height: int, background: Color = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.image = Image.new("RGBA", (self.width, self.height), background.to_rgba8())
        self._draw = ImageDraw.Draw(self.image)

    @classmethod
    def from_array(cls, rgb: np.ndarray) -> "Canvas":
        """Canvas initialized from an (H, W, 3|4) uint8 or [0, 1] float array."""
        rgb = np.asarray(rgb)
        canvas = cls(rgb.shape[1], rgb.shape[0])
        canvas.blit(rgb)
        return canvas

    @property
    def size(self):
        return self.width, self.height

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def fill(self, color: Color):
        self._draw.rectangle((0, 0, self.width, self.height), fill=color.to_rgba8())

    def set_pixel(self, x: float, y: float, color: Color) -> bool:
        """Write one pixel; positions outside the canvas are skipped. Returns whether it was written."""
        if not self.contains(x, y):
            return False
        self.image.putpixel((int(x), int(y)), color.to_rgba8())
        return True

    def blit(self, rgb: np.ndarray):
        """Replace the canvas content with an (H, W, 3|4) array."""
        rgb = np.asarray(rgb)
        if rgb.ndim != 3 or rgb.shape[2] not in (3, 4) or rgb.shape[:2] != (self.height, self.width):
            raise ValueError(
                f"Expected array of shape ({self.height}, {self.width}, 3|4), got {rgb.shape}"
            )
        if rgb.dtype != np.uint8:
            rgb = (np.clip(rgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
        self.image.paste(Image.fromarray(np.ascontiguousarray(rgb)).convert("RGBA"))

    def stroke_path(self, points: Sequence[Sequence[float]], color: Color, width: float = 1.0):
        """Stroke the polyline through ``points``."""
        xy = _xy_list(points)
        if not xy:
            return
        if len(xy) == 1:
            xy = xy * 2
        self._draw.line(xy, fill=color.to_rgba8(), width=max(1, int(round(width))), joint="curve")

    def stroke_circle(self, center: Sequence[float], radius: float, color: Color,
                      width: float = 1.0):
        cx, cy = center
        bbox = (cx - radius, cy - radius, cx + radius, cy + radius)
        self._draw.ellipse(bbox, outline=color.to_rgba8(), width=max(1, int(round(width))))

    def fill_polygon(self, points: Sequence[Sequence[float]], color: Color):
        self._draw.polygon(_xy_list(points), fill=color.to_rgba8())

    def to_array(self) -> np.ndarray:
        """Copy of the pixels as an (H, W, 4) uint8 array."""
        return np.array(self.image)

    def save(self, path):
        """Write the image; the format follows the file extension (PNG recommended)."""
        self.image.save(path)

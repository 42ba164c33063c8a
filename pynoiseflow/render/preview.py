"""Noise preview renderer: one scalar field drawn over the whole canvas."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import NoiseImageConfig
from ..noise import ScalarNoiseField, SeedSource
from ..raster import Canvas


def noise_to_gray(values: np.ndarray) -> np.ndarray:
    """Map noise values in [-1, 1] to uint8 gray levels ``clamp((v + 1) / 2 * 256)``."""
    return np.clip((np.asarray(values) + 1.0) / 2.0 * 256.0, 0.0, 255.0).astype(np.uint8)


def render_noise_image(config: NoiseImageConfig, seeds: Optional[SeedSource] = None) -> Canvas:
    """
    Sample a scalar field at every pixel.

    Without a palette the result is grayscale; with one, values remapped to
    [0, 1] are resolved through the palette.
    """
    seeds = seeds if seeds is not None else SeedSource()
    width, height = config.canvas.width, config.canvas.height
    field = ScalarNoiseField.from_seed(config.noise, seeds.next_seed(), scale=config.field_scale)

    values = field.sample_grid(np.arange(width), np.arange(height))

    if config.palette is None:
        gray = noise_to_gray(values)
        rgb = np.stack([gray, gray, gray], axis=-1)
    else:
        rgb = config.palette.resolve_array((values + 1.0) / 2.0)

    return Canvas.from_array(rgb)

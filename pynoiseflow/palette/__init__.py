"""
Palette module for PyNoiseFlow.

Turns scalar samples into colors, either by discrete lookup into an ordered
color list or by interpolating a gradient, and loads palettes from hex text
files.

Available Components:
- Color: RGBA tuple with float channels in [0, 1]
- DiscretePalette: floor-indexed color list with clamped ends
- GradientPalette / GradientStop: piecewise linear gradient
- parse_hex_palette / load_hex_palette: hex palette text and files
- get_default_palette: palettes bundled with the package

Usage:
    import pynoiseflow as nf

    palette = nf.palette.load_hex_palette("colors.hex")
    color = palette.resolve(0.25)

    sunset = nf.palette.GradientPalette.from_colors([
        (0.00, 0.05, 0.20), (0.70, 0.10, 0.20), (0.95, 0.90, 0.30),
    ])
    ten_colors = sunset.take(10)
"""

from .colors import Color, BLACK, WHITE, BLUE
from .resolvers import DiscretePalette, GradientPalette, GradientStop, PaletteResolver
from .hexfile import (
    DEFAULT_PALETTE,
    HexColorError,
    get_default_palette,
    list_default_palettes,
    load_hex_palette,
    parse_hex_color,
    parse_hex_palette,
)

__all__ = [
    "Color", "BLACK", "WHITE", "BLUE",
    "DiscretePalette", "GradientPalette", "GradientStop", "PaletteResolver",
    "DEFAULT_PALETTE", "HexColorError", "get_default_palette", "list_default_palettes",
    "load_hex_palette", "parse_hex_color", "parse_hex_palette",
]

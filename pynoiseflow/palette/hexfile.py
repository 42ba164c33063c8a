"""
Hex palette files for PyNoiseFlow.

A palette file lists one RGB color per line as exactly six hexadecimal digits,
e.g.::

    000000
    ff0000
    00ff00

Blank lines are ignored. Any other malformed line raises ``HexColorError``
naming the offending text, its line number and its length. Several palettes
ship with the package (see ``list_default_palettes``).
"""

import string
from importlib import resources
from pathlib import Path
from typing import List, Optional

from .colors import Color
from .resolvers import DiscretePalette

HEX_COLOR_LENGTH = 6
DEFAULT_PALETTE = "ocaso"


class HexColorError(ValueError):
    """A palette line is not a 6-digit hex RGB color."""

    def __init__(self, input_str: str, reason: str, line_number: Optional[int] = None):
        self.input_str = input_str
        self.actual_length = len(input_str)
        self.expected_length = HEX_COLOR_LENGTH
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(
            f"{where}invalid hex color {input_str!r} (length {self.actual_length}): {reason}; "
            f"expected {HEX_COLOR_LENGTH} hex digits like 'ff8800'"
        )


def parse_hex_color(s: str, line_number: Optional[int] = None) -> Color:
    """
    Parse a 6-digit hex string such as ``"FF0000"`` into an opaque ``Color``.

    Raises:
        HexColorError: If ``s`` is not exactly six hex digits
    """
    if len(s) != HEX_COLOR_LENGTH:
        raise HexColorError(s, f"wrong length, expected {HEX_COLOR_LENGTH}", line_number)
    if any(c not in string.hexdigits for c in s):
        raise HexColorError(s, "not a hexadecimal number", line_number)
    r, g, b = bytes.fromhex(s)
    return Color.from_rgba8(r, g, b)


def parse_hex_palette(text: str) -> List[Color]:
    """Parse palette text, one color per line, keeping file order."""
    colors = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        colors.append(parse_hex_color(line, line_number))
    return colors


def load_hex_palette(path) -> DiscretePalette:
    """
    Load a palette file into a ``DiscretePalette``.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        HexColorError: On a malformed line
        ValueError: If the file holds no colors
    """
    text = Path(path).read_text(encoding="utf-8")
    colors = parse_hex_palette(text)
    if not colors:
        raise ValueError(f"Palette file '{path}' contains no colors")
    return DiscretePalette(colors)


def list_default_palettes() -> List[str]:
    """Names of the palettes bundled with the package."""
    assets = resources.files(__package__) / "assets"
    return sorted(p.name[:-4] for p in assets.iterdir() if p.name.endswith(".hex"))


def get_default_palette(name: str = DEFAULT_PALETTE) -> DiscretePalette:
    """Load a bundled palette by name."""
    if name not in list_default_palettes():
        raise ValueError(
            f"Unknown palette '{name}', expected one of {', '.join(list_default_palettes())}"
        )
    text = (resources.files(__package__) / "assets" / f"{name}.hex").read_text(encoding="utf-8")
    return DiscretePalette(parse_hex_palette(text))

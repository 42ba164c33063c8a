"""RGBA color value shared by palettes, renderers and the canvas."""

from typing import NamedTuple, Tuple


def _to_byte(channel: float) -> int:
    return int(min(1.0, max(0.0, channel)) * 255.0 + 0.5)


class Color(NamedTuple):
    """RGBA color with float channels in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            if not 0 <= value <= 255:
                raise ValueError(f"8-bit channel {name} out of range: {value}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return (_to_byte(self.red), _to_byte(self.green), _to_byte(self.blue),
                _to_byte(self.alpha))

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba8()
        return f"{r:02x}{g:02x}{b:02x}"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0)

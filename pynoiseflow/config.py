"""
Render configuration for PyNoiseFlow.

Each renderer takes one frozen dataclass holding every parameter it needs.
Values are validated on construction, so a bad configuration raises
``ValueError`` before anything is drawn. The dataclasses do not care whether
their values came from CLI flags, a script or the defaults in ``constants``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from . import constants as cte
from .noise.sources import NOISE_KINDS
from .palette.resolvers import DiscretePalette, GradientPalette

Palette = Union[DiscretePalette, GradientPalette]

COLOR_MODES = ("noise", "random")


def _require_positive(**values):
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")


def _require_non_negative(**values):
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


def _require_noise_kind(kind):
    if kind not in NOISE_KINDS:
        raise ValueError(f"Unknown noise kind '{kind}', expected one of {', '.join(NOISE_KINDS)}")


@dataclass(frozen=True)
class CanvasConfig:
    width: int = cte.WIDTH
    height: int = cte.HEIGHT

    def __post_init__(self):
        _require_positive(width=self.width, height=self.height)

    @property
    def bounds(self) -> Tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class FlowConfig:
    """
    Parameters of the flow renderer (tails and walks over a ``Noise2x2`` field).

    ``palette`` overrides the walk colors; when None the walk palette is
    ``walk_palette_size`` colors taken from the ``gradient`` stops.
    """

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    noise: str = cte.FLOW_NOISE
    scale: float = cte.FLOW_SCALE
    bias: Tuple[float, float] = (cte.FLOW_BIAS_X, cte.FLOW_BIAS_Y)
    normalize: bool = cte.FLOW_NORMALIZE
    draw_tails: bool = False
    tail_stride: float = cte.TAIL_STRIDE
    tail_length: float = cte.TAIL_LENGTH
    draw_walks: bool = True
    n_walks: int = cte.WALK_COUNT
    walk_steps: int = cte.WALK_STEPS
    step_size: float = cte.WALK_STEP_SIZE
    walk_width: float = cte.WALK_WIDTH
    color_scale: float = cte.COLOR_SCALE
    color_range: float = cte.COLOR_RANGE
    gradient: Tuple[Tuple[float, ...], ...] = cte.WALK_GRADIENT
    walk_palette_size: int = cte.WALK_PALETTE_SIZE
    palette: Optional[DiscretePalette] = None

    def __post_init__(self):
        _require_noise_kind(self.noise)
        _require_positive(scale=self.scale, tail_stride=self.tail_stride,
                          color_scale=self.color_scale, walk_width=self.walk_width,
                          walk_palette_size=self.walk_palette_size)
        _require_non_negative(tail_length=self.tail_length, n_walks=self.n_walks,
                              walk_steps=self.walk_steps, step_size=self.step_size)
        if len(self.bias) != 2:
            raise ValueError(f"bias must have two components, got {self.bias}")
        if not self.gradient:
            raise ValueError("Walk gradient must contain at least one color")


@dataclass(frozen=True)
class TrisConfig:
    """
    Parameters of the triangle renderer.

    With ``color_mode="noise"`` each triangle takes the palette color of the
    height field at its centroid; with ``"random"`` colors are drawn at random.
    ``palette`` None selects the bundled default palette.
    """

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    side: float = cte.TRIANGLE_SIDE
    noise: str = cte.TRIS_NOISE
    scale: float = cte.TRIS_SCALE
    color_mode: str = "noise"
    stagger: bool = True
    palette: Optional[Palette] = None

    def __post_init__(self):
        _require_noise_kind(self.noise)
        _require_positive(side=self.side, scale=self.scale)
        if self.color_mode not in COLOR_MODES:
            raise ValueError(
                f"Unknown color mode '{self.color_mode}', expected one of {', '.join(COLOR_MODES)}"
            )


@dataclass(frozen=True)
class NoiseImageConfig:
    """
    Parameters of the noise preview renderer.

    ``scale`` divides pixel coordinates; with ``relative=True`` it is instead
    the number of noise units across the longer image side.
    """

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    noise: str = cte.PREVIEW_NOISE
    scale: float = cte.PREVIEW_SCALE
    relative: bool = False
    palette: Optional[Palette] = None

    def __post_init__(self):
        _require_noise_kind(self.noise)
        _require_positive(scale=self.scale)

    @property
    def field_scale(self) -> float:
        if self.relative:
            return max(self.canvas.width, self.canvas.height) / self.scale
        return self.scale


@dataclass(frozen=True)
class FeatherweightConfig:
    """
    Parameters of the featherweight renderer: a square image with an optional
    flow background, optional straight tails and white Euler-traced walks.
    Noise coordinates are ``p / size * scale``.
    """

    size: int = cte.FEATHER_SIZE
    scale: float = cte.FEATHER_SCALE
    noise: str = "perlin"
    draw_flow_bg: bool = False
    draw_tails: bool = False
    tail_freq: int = cte.FEATHER_TAIL_FREQ
    tail_length: int = cte.FEATHER_TAIL_LENGTH
    draw_walks: bool = True
    walk_count: int = cte.FEATHER_WALK_COUNT
    walk_length: int = cte.FEATHER_WALK_LENGTH
    walk_normalize: bool = False

    def __post_init__(self):
        _require_noise_kind(self.noise)
        _require_positive(size=self.size, scale=self.scale, tail_freq=self.tail_freq,
                          walk_length=self.walk_length)
        _require_non_negative(tail_length=self.tail_length, walk_count=self.walk_count)

    @property
    def pos_scale(self) -> float:
        return self.size / self.scale

    @property
    def tail_stride(self) -> int:
        return max(1, self.size // self.tail_freq)

"""
Flow path integration for PyNoiseFlow.

Integrators follow a ``Noise2x2`` flow field from a start position and return
an immutable ``FlowPath``:

- tail: one field sample, drawn as a straight segment of fixed length
- walk: chained cubic Bezier segments, three field samples per segment
- trace: explicit Euler steps, one field sample per point (pixel traces)

Integrators never mutate the field, so many paths can be built from one
shared field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np
from matplotlib.bezier import BezierSegment

from ..noise.fields import Noise2x2

LINE = "line"
CUBIC = "cubic"


@dataclass(frozen=True, eq=False)
class FlowPath:
    """
    Ordered positions produced by one integration run.

    ``kind="line"`` paths are polylines. ``kind="cubic"`` paths hold the start
    point followed by three points per Bezier segment (two control points and
    the segment end point).

    Attributes:
        points: Read-only float64 array of shape (n, 2), n >= 1
        kind: ``"line"`` or ``"cubic"``
    """

    points: np.ndarray
    kind: str = LINE

    def __post_init__(self):
        points = np.array(self.points, dtype=np.float64).reshape(-1, 2)
        if len(points) == 0:
            raise ValueError("A flow path needs at least one point")
        if self.kind not in (LINE, CUBIC):
            raise ValueError(f"Unknown path kind '{self.kind}'")
        if self.kind == CUBIC and (len(points) - 1) % 3 != 0:
            raise ValueError(f"Cubic path needs 1 + 3k points, got {len(points)}")
        points.setflags(write=False)
        object.__setattr__(self, "points", points)

    def __len__(self):
        return len(self.points)

    @property
    def start(self) -> np.ndarray:
        return self.points[0]

    @property
    def end(self) -> np.ndarray:
        return self.points[-1]

    @property
    def n_segments(self) -> int:
        if self.kind == CUBIC:
            return (len(self.points) - 1) // 3
        return len(self.points) - 1

    def bezier_segments(self) -> Iterator[np.ndarray]:
        """Yield the (4, 2) control polygon of each cubic segment."""
        if self.kind != CUBIC:
            raise ValueError("Only cubic paths have Bezier segments")
        for k in range(self.n_segments):
            yield self.points[3 * k:3 * k + 4]

    def polyline(self, samples_per_segment: int = 8) -> np.ndarray:
        """Flatten the path to polyline vertices of shape (m, 2)."""
        if self.kind == LINE or self.n_segments == 0:
            return np.array(self.points)
        t = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
        pieces = [self.points[:1]]
        for control in self.bezier_segments():
            pieces.append(BezierSegment(control)(t))
        return np.concatenate(pieces)


def in_bounds(position: Sequence[float], bounds: Optional[Tuple[float, float]]) -> bool:
    """True when ``position`` lies in [0, width) x [0, height), or when ``bounds`` is None."""
    if bounds is None:
        return True
    x, y = position
    width, height = bounds
    return 0.0 <= x < width and 0.0 <= y < height


def tail(field: Noise2x2, start: Sequence[float], tail_length: float) -> FlowPath:
    """
    Straight two-point path ``[start, start + d * tail_length]`` with ``d = field(start)``.

    A zero flow vector gives a zero-length segment.
    """
    start = np.asarray(start, dtype=np.float64)
    direction = field.sample(start)
    return FlowPath(np.stack([start, start + direction * tail_length]), LINE)


def walk(field: Noise2x2, start: Sequence[float], n_steps: int, step_size: float,
         bounds: Optional[Tuple[float, float]] = None) -> FlowPath:
    """
    Integrate a smooth curve through the flow field.

    Each step samples the field three times, advancing ``step_size`` along the
    local direction between samples, and appends a cubic segment from the
    current point through the first two positions to the third::

        c1 = cur + f(cur) * h
        c2 = c1 + f(c1) * h
        c3 = c2 + f(c2) * h

    Args:
        field: Flow field to follow
        start: Start position (x, y)
        n_steps: Maximum number of cubic segments
        step_size: Distance factor ``h`` applied to each sampled vector
        bounds: Optional (width, height); integration stops before a segment
            whose start point lies outside [0, width) x [0, height)

    Returns:
        FlowPath: Cubic path. Its length is counted in segments
        (``path.n_segments``), each storing two control points and an end
        point, so ``k`` segments hold ``3k + 1`` points. With
        ``step_size=0`` the walk emits exactly ``n_steps`` segments whose
        points all equal ``start``. A start point outside ``bounds`` gives
        a single-point path.
    """
    if n_steps < 0:
        raise ValueError(f"n_steps must be non-negative, got {n_steps}")
    cur = np.asarray(start, dtype=np.float64)
    points = [cur]
    for _ in range(n_steps):
        if not in_bounds(cur, bounds):
            break
        c1 = cur + field.sample(cur) * step_size
        c2 = c1 + field.sample(c1) * step_size
        c3 = c2 + field.sample(c2) * step_size
        points.extend((c1, c2, c3))
        cur = c3
    return FlowPath(np.stack(points), CUBIC)


def trace(field: Noise2x2, start: Sequence[float], n_steps: int, step_size: float = 1.0,
          bounds: Optional[Tuple[float, float]] = None) -> FlowPath:
    """
    Follow the field with explicit Euler steps ``cur += f(cur) * step_size``.

    Records at most ``n_steps`` points, the start point included, and stops at
    the first point leaving ``bounds``.
    """
    if n_steps < 1:
        raise ValueError(f"n_steps must be at least 1, got {n_steps}")
    cur = np.asarray(start, dtype=np.float64)
    points = [cur]
    if in_bounds(cur, bounds):
        for _ in range(n_steps - 1):
            cur = cur + field.sample(cur) * step_size
            if not in_bounds(cur, bounds):
                break
            points.append(cur)
    return FlowPath(np.stack(points), LINE)

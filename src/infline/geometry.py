"""
geometry.py
-----------

Clipping of an "infinite" straight line to an axis-aligned rectangle.

A line is described in point-slope form

    (y - by) = slope * (x - bx)

where ``slope == inf`` stands for the vertical line ``x = bx``. The solver
returns the visible part of the line as the two points where it crosses the
rectangle boundary, or None when the line misses the rectangle.

Edge scan used for the general (finite, nonzero slope) case:

              top (y = y1)
          +-----------------+ (x1, y1)
          |                 |
    left  |                 |  right
  (x = x0)|                 |(x = x1)
          |                 |
          +-----------------+
   (x0, y0)  bottom (y = y0)

Hits are collected in the order left, right, bottom, top with inclusive
bounds, so a corner is reported once by each of its two edges. A computed
coordinate within `CORNER_RTOL` of a bound is snapped onto it first, so a
diagonal through two corners keeps both of them despite rounding.
"""

from __future__ import annotations

__all__ = [
    "Point", "Segment", "LineEquation", "Rectangle",
    "intersect", "segment_xy", "CORNER_RTOL",
]

import math
from dataclasses import dataclass
from numbers import Real
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import GeometryInvariantViolation, InvalidArgumentError

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

# Relative tolerance (scaled by rectangle size) for snapping a computed edge
# hit onto a bound and for two edge hits to count as the same corner.
CORNER_RTOL = 1e-9


# =============================================================================
# Data model
# =============================================================================
@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle with ``xmin <= xmax`` and ``ymin <= ymax``."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        bounds = (self.xmin, self.xmax, self.ymin, self.ymax)
        if not all(math.isfinite(b) for b in bounds):
            raise GeometryInvariantViolation(f"Rectangle bounds must be finite, got {bounds}")
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise GeometryInvariantViolation(f"Rectangle bounds are not ordered: {bounds}")

    @classmethod
    def from_ranges(cls, xrange: Sequence[float], yrange: Sequence[float]) -> Rectangle:
        """Build a rectangle from (possibly inverted) x and y ranges."""
        xs = [float(v) for v in xrange]
        ys = [float(v) for v in yrange]
        if len(xs) < 2 or len(ys) < 2:
            raise GeometryInvariantViolation(
                f"Ranges need at least two values, got {xs} and {ys}")
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def xrange(self) -> Tuple[float, float]:
        return self.xmin, self.xmax

    @property
    def yrange(self) -> Tuple[float, float]:
        return self.ymin, self.ymax

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin


@dataclass(frozen=True)
class LineEquation:
    """
    Straight line ``(y - by) = slope * (x - bx)``.

    Attributes:
        slope: Finite slope, or ``inf`` for a vertical line. ``-inf`` is
            stored as ``inf`` since both describe the same line.
        bx, by: Coordinates of a point the line passes through.

    Raises:
        InvalidArgumentError: non-numeric values, NaN slope, or a
            non-finite point.
    """

    slope: float
    bx: float = 0.0
    by: float = 0.0

    def __post_init__(self):
        for name in ("slope", "bx", "by"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidArgumentError(f"Unsupported {name} type: {type(value).__name__}")
            object.__setattr__(self, name, float(value))

        if math.isnan(self.slope):
            raise InvalidArgumentError("slope must not be NaN")
        if math.isinf(self.slope):
            object.__setattr__(self, "slope", math.inf)
        if not (math.isfinite(self.bx) and math.isfinite(self.by)):
            raise InvalidArgumentError(
                f"Line must pass through a finite point, got ({self.bx}, {self.by})")

    @classmethod
    def horizontal(cls, y: float = 0.0) -> LineEquation:
        return cls(0.0, 0.0, y)

    @classmethod
    def vertical(cls, x: float = 0.0) -> LineEquation:
        return cls(math.inf, x, 0.0)

    @property
    def is_horizontal(self) -> bool:
        return self.slope == 0

    @property
    def is_vertical(self) -> bool:
        return math.isinf(self.slope)

    def clip(self, rect: Rectangle) -> Optional[Segment]:
        """Return the part of this line visible inside `rect`."""
        return intersect(self.slope, self.bx, self.by, rect.xrange, rect.yrange)

    def __str__(self) -> str:
        if self.is_vertical:
            return f"x = {self.bx:g}"
        return f"(y - {self.by:g}) = {self.slope:g} (x - {self.bx:g})"


# =============================================================================
# Solver
# =============================================================================
def intersect(slope: float, bx: float, by: float,
              xrange: Sequence[float], yrange: Sequence[float]) -> Optional[Segment]:
    """
    Find where the line ``(y - by) = slope * (x - bx)`` crosses a rectangle.

    Args:
        slope: Line slope; ``inf`` (either sign) for a vertical line.
        bx, by: A point on the line.
        xrange, yrange: Rectangle sides. Order does not matter.

    Returns:
        None if no part of the line is visible, otherwise two distinct
        points on the rectangle boundary.

        Horizontal and vertical lines use strict bounds, so a line lying
        exactly on a rectangle edge is not visible. Other slopes use
        inclusive bounds; a line through two opposite corners yields those
        corners, a line through one corner and the interior yields that
        corner and its exit point, and a line that only touches a corner
        yields None.

    Raises:
        GeometryInvariantViolation: NaN slope, non-finite bounds, or edge
            hits that do not reduce to zero or two points.
    """
    slope, bx, by = float(slope), float(bx), float(by)
    if math.isnan(slope):
        raise GeometryInvariantViolation("slope must not be NaN")

    rect = Rectangle.from_ranges(xrange, yrange)
    x0, x1, y0, y1 = rect.xmin, rect.xmax, rect.ymin, rect.ymax

    if slope == 0:
        if y0 < by < y1:
            return (x0, by), (x1, by)
        return None

    if math.isinf(slope):
        if x0 < bx < x1:
            return (bx, y0), (bx, y1)
        return None

    hits: List[Point] = []
    for x in (x0, x1):
        y = _snap(slope * (x - bx) + by, y0, y1, rect.height)
        if y0 <= y <= y1:
            hits.append((x, y))
    for y in (y0, y1):
        x = _snap((y - by) / slope + bx, x0, x1, rect.width)
        if x0 <= x <= x1:
            hits.append((x, y))

    return _select_segment(hits, rect, slope, bx, by)


def _snap(value: float, lo: float, hi: float, span: float) -> float:
    """Return `lo` or `hi` when `value` differs from it only by rounding."""
    for bound in (lo, hi):
        if math.isclose(value, bound, rel_tol=CORNER_RTOL, abs_tol=CORNER_RTOL * span):
            return bound
    return value


def _select_segment(hits: List[Point], rect: Rectangle,
                    slope: float, bx: float, by: float) -> Optional[Segment]:
    if not hits:
        return None

    if len(hits) == 4:
        # Two opposite corners, each reported by both of its edges. The left
        # and right hits are one of each.
        hits = hits[:2]

    distinct = _distinct_points(hits, rect)
    if len(distinct) == 2:
        return distinct[0], distinct[1]
    if len(hits) == 2 and len(distinct) == 1:
        # Line touches a single corner: nothing to draw.
        return None

    raise GeometryInvariantViolation(
        f"Line (y - {by}) = {slope} (x - {bx}) must cross the boundary of "
        f"{rect} at 0 or 2 points, found {len(hits)} edge hits: {hits}")


def _distinct_points(points: List[Point], rect: Rectangle) -> List[Point]:
    """Drop points that coincide with an earlier one; order is preserved."""
    kept: List[Point] = []
    for p in points:
        if not any(_same_point(p, q, rect) for q in kept):
            kept.append(p)
    return kept


def _same_point(p: Point, q: Point, rect: Rectangle) -> bool:
    return (
        math.isclose(p[0], q[0], rel_tol=CORNER_RTOL, abs_tol=CORNER_RTOL * rect.width)
        and math.isclose(p[1], q[1], rel_tol=CORNER_RTOL, abs_tol=CORNER_RTOL * rect.height)
    )


def segment_xy(segment: Optional[Segment]) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Convert a segment into the x and y arrays expected by `Line2D.set_data`."""
    if segment is None:
        return np.empty(0), np.empty(0)
    (x0, y0), (x1, y1) = segment
    return np.array([x0, x1]), np.array([y0, y1])

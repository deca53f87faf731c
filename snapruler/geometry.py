"""Planar geometry kernel used by the snapping layer and the guides.

Every operation here is total: degenerate inputs yield either ``None``
(no result) or a documented fallback point, never an exception. Points are
validated once, when a :class:`Point2D` is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from .tolerances import DEGENERATE_LENGTH_SQ, PARALLEL_DENOM
from .types import Coord, InvalidPointError


@dataclass(frozen=True)
class Point2D:
    """Immutable finite point in canvas coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        x = float(self.x)
        y = float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidPointError(f"non-finite point ({self.x!r}, {self.y!r})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Point2D":
        return Point2D(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> Coord:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Point2D({self.x:.6g}, {self.y:.6g})"


PointLike = Union[Point2D, Sequence[float]]


def as_point(value: PointLike) -> Point2D:
    """Coerce an ``(x, y)`` pair into a :class:`Point2D`."""

    if isinstance(value, Point2D):
        return value
    if len(value) != 2:
        raise InvalidPointError(f"expected an (x, y) pair, got {value!r}")
    return Point2D(value[0], value[1])


def is_finite_pair(x: float, y: float) -> bool:
    try:
        return math.isfinite(float(x)) and math.isfinite(float(y))
    except (TypeError, ValueError):
        return False


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def midpoint(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x * 0.5 + b.x * 0.5, a.y * 0.5 + b.y * 0.5)


def project_point_on_line(p: Point2D, l1: Point2D, l2: Point2D) -> Point2D:
    """Project ``p`` orthogonally onto the infinite line through ``l1`` and ``l2``.

    When ``l1`` and ``l2`` coincide the projection is undefined and ``l1`` is
    returned instead. The same fallback applies when the arithmetic overflows.
    """

    dx = l2.x - l1.x
    dy = l2.y - l1.y
    denom = dx * dx + dy * dy
    if denom < DEGENERATE_LENGTH_SQ:
        return l1
    t = ((p.x - l1.x) * dx + (p.y - l1.y) * dy) / denom
    px = l1.x + t * dx
    py = l1.y + t * dy
    if not is_finite_pair(px, py):
        return l1
    return Point2D(px, py)


def polar_angle(origin: Point2D, p: Point2D) -> float:
    """Return the direction of ``origin -> p`` in radians, ``(-pi, pi]``."""

    return math.atan2(p.y - origin.y, p.x - origin.x)


def angle_between(p1: Point2D, vertex: Point2D, p2: Point2D) -> float:
    """Unsigned angle in degrees, ``[0, 180]``, between ``vertex->p1`` and ``vertex->p2``."""

    diff = math.degrees(polar_angle(vertex, p2) - polar_angle(vertex, p1))
    while diff <= -180.0:
        diff += 360.0
    while diff > 180.0:
        diff -= 360.0
    return abs(diff)


def line_intersection(p1: Point2D, p2: Point2D, q1: Point2D, q2: Point2D) -> Optional[Point2D]:
    """Intersect the infinite lines ``p1-p2`` and ``q1-q2``.

    The crossing is returned even when it lies outside both segments.
    Parallel and coincident lines give ``None``.
    """

    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = q1.x, q1.y
    x4, y4 = q2.x, q2.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < PARALLEL_DENOM:
        return None
    det_p = x1 * y2 - y1 * x2
    det_q = x3 * y4 - y3 * x4
    px = (det_p * (x3 - x4) - (x1 - x2) * det_q) / denom
    py = (det_p * (y3 - y4) - (y1 - y2) * det_q) / denom
    if not is_finite_pair(px, py):
        return None
    return Point2D(px, py)


def translate(p: Point2D, dx: float, dy: float) -> Point2D:
    return Point2D(p.x + dx, p.y + dy)


def unit_vector(angle_rad: float) -> Point2D:
    return Point2D(math.cos(angle_rad), math.sin(angle_rad))


def polyline_length(points: Iterable[Point2D]) -> float:
    total = 0.0
    prev: Optional[Point2D] = None
    for pt in points:
        if prev is not None:
            total += distance(prev, pt)
        prev = pt
    return total


__all__ = [
    "Point2D",
    "PointLike",
    "angle_between",
    "as_point",
    "distance",
    "is_finite_pair",
    "line_intersection",
    "midpoint",
    "polar_angle",
    "polyline_length",
    "project_point_on_line",
    "translate",
    "unit_vector",
]

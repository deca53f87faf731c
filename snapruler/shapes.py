"""Drawn primitives and the ordered catalog the snapping layer reads."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .geometry import Point2D, PointLike, as_point, polyline_length
from .types import NoActiveStrokeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """Straight segment; snapping treats it as an infinite line for intersections."""

    p1: Point2D
    p2: Point2D


@dataclass
class PolyStroke:
    """Freehand stroke. Grows append-only while it is being drawn."""

    points: List[Point2D] = field(default_factory=list)

    def append(self, point: Point2D) -> None:
        self.points.append(point)

    @property
    def first(self) -> Optional[Point2D]:
        return self.points[0] if self.points else None

    @property
    def last(self) -> Optional[Point2D]:
        return self.points[-1] if self.points else None

    def length(self) -> float:
        return polyline_length(self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float

    def __post_init__(self) -> None:
        radius = float(self.radius)
        if not math.isfinite(radius) or radius <= 0.0:
            raise ValueError(f"circle radius must be positive, got {self.radius!r}")
        object.__setattr__(self, "radius", radius)


Shape = Union[Line, PolyStroke, Circle]
CatalogSnapshot = Tuple[Shape, ...]


def make_line(p1: PointLike, p2: PointLike) -> Line:
    return Line(as_point(p1), as_point(p2))


def make_stroke(points: Sequence[PointLike]) -> PolyStroke:
    return PolyStroke([as_point(p) for p in points])


def make_circle(center: PointLike, radius: float) -> Circle:
    return Circle(as_point(center), radius)


class ShapeCatalog:
    """Ordered shapes; index order is z-order and draw order.

    The catalog is append-only while a stroke is drawn. Whole-sequence swaps
    go through :meth:`snapshot` / :meth:`restore`, which is the interface the
    external undo/redo history uses.
    """

    def __init__(self, shapes: Optional[Sequence[Shape]] = None) -> None:
        self._shapes: List[Shape] = list(shapes or [])
        self._active: Optional[PolyStroke] = None

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def active_stroke(self) -> Optional[PolyStroke]:
        return self._active

    def lines(self) -> List[Line]:
        return [shape for shape in self._shapes if isinstance(shape, Line)]

    def append(self, shape: Shape) -> None:
        if isinstance(shape, PolyStroke) and not shape.points:
            raise ValueError("cannot append an empty poly-stroke")
        self._shapes.append(shape)

    def begin_stroke(self, start: Point2D) -> PolyStroke:
        if self._active is not None:
            logger.debug("Closing unfinished stroke with %d points", len(self._active))
            self.end_stroke()
        stroke = PolyStroke([start])
        self._shapes.append(stroke)
        self._active = stroke
        logger.info("Began stroke #%d at %r", len(self._shapes) - 1, start)
        return stroke

    def add_point(self, point: Point2D) -> None:
        if self._active is None:
            raise NoActiveStrokeError("add_point called with no stroke in progress")
        self._active.append(point)

    def end_stroke(self) -> Optional[PolyStroke]:
        stroke = self._active
        self._active = None
        if stroke is not None:
            logger.info("Ended stroke with %d points", len(stroke))
        return stroke

    def snapshot(self) -> CatalogSnapshot:
        """Return an immutable copy of the current sequence."""

        return tuple(
            PolyStroke(list(shape.points)) if isinstance(shape, PolyStroke) else shape
            for shape in self._shapes
        )

    def restore(self, snapshot: Sequence[Shape]) -> None:
        """Swap in an entire sequence, abandoning any stroke in progress."""

        self._active = None
        self._shapes = [
            PolyStroke(list(shape.points)) if isinstance(shape, PolyStroke) else shape
            for shape in snapshot
        ]
        logger.info("Restored catalog with %d shapes", len(self._shapes))


__all__ = [
    "CatalogSnapshot",
    "Circle",
    "Line",
    "PolyStroke",
    "Shape",
    "ShapeCatalog",
    "make_circle",
    "make_line",
    "make_stroke",
]

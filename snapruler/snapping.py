"""Snap candidate generation and nearest-candidate selection.

A query is a pure function of ``(point, shapes, grid_spacing_px, zoom)``.
Candidates are produced in a fixed order: the grid candidate, then shape
anchors in catalog order, then pairwise line intersections. Ties on distance
resolve to the earliest candidate in that order.

Pairwise intersections are quadratic in the number of ``Line`` shapes. That is
the scaling ceiling of this engine; catalogs are expected to hold few lines
compared with stroke points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .geometry import Point2D, line_intersection, midpoint
from .logging_utils import apply_debug_logging
from .shapes import Circle, Line, PolyStroke, Shape
from .tolerances import (
    MIN_GRID_SPACING_PX,
    MIN_ZOOM,
    POLYSTROKE_MIDPOINT_SAMPLES,
    SNAP_RADIUS_BASE_PX,
    SNAP_RADIUS_MAX_PX,
    SNAP_RADIUS_MIN_PX,
    clamp,
)

logger = logging.getLogger(__name__)


class SnapSource(Enum):
    GRID = "grid"
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"
    INTERSECTION = "intersection"


@dataclass(frozen=True)
class SnapCandidate:
    position: Point2D
    source: SnapSource


def snap_radius(zoom: float) -> float:
    """Snap tolerance in pixels: ``clamp(24 / zoom, 8, 48)`` with zoom floored at 0.1."""

    zoom = max(float(zoom), MIN_ZOOM)
    return clamp(SNAP_RADIUS_BASE_PX / zoom, SNAP_RADIUS_MIN_PX, SNAP_RADIUS_MAX_PX)


def grid_candidate(point: Point2D, grid_spacing_px: float) -> SnapCandidate:
    spacing = max(float(grid_spacing_px), MIN_GRID_SPACING_PX)
    gx = round(point.x / spacing) * spacing
    gy = round(point.y / spacing) * spacing
    return SnapCandidate(Point2D(gx, gy), SnapSource.GRID)


def _stroke_candidates(stroke: PolyStroke) -> List[SnapCandidate]:
    pts = stroke.points
    if not pts:
        return []
    out = [
        SnapCandidate(pts[0], SnapSource.ENDPOINT),
        SnapCandidate(pts[-1], SnapSource.ENDPOINT),
    ]
    # Stride keeps the sampled midpoints near POLYSTROKE_MIDPOINT_SAMPLES per stroke.
    step = max(1, len(pts) // POLYSTROKE_MIDPOINT_SAMPLES)
    for i in range(0, len(pts) - 1, step):
        out.append(SnapCandidate(midpoint(pts[i], pts[i + 1]), SnapSource.MIDPOINT))
    return out


def _shape_candidates(shape: Shape) -> List[SnapCandidate]:
    if isinstance(shape, Line):
        return [
            SnapCandidate(shape.p1, SnapSource.ENDPOINT),
            SnapCandidate(shape.p2, SnapSource.ENDPOINT),
            SnapCandidate(midpoint(shape.p1, shape.p2), SnapSource.MIDPOINT),
        ]
    if isinstance(shape, PolyStroke):
        return _stroke_candidates(shape)
    if isinstance(shape, Circle):
        # TODO: offer the centre and the four quadrant points as anchors.
        return []
    return []


def line_intersections(lines: Sequence[Line]) -> List[SnapCandidate]:
    """Crossings of the infinite lines through every pair of ``lines``."""

    out: List[SnapCandidate] = []
    for i in range(len(lines)):
        a = lines[i]
        for j in range(i + 1, len(lines)):
            b = lines[j]
            hit = line_intersection(a.p1, a.p2, b.p1, b.p2)
            if hit is not None:
                out.append(SnapCandidate(hit, SnapSource.INTERSECTION))
    return out


def generate_candidates(
    point: Point2D, shapes: Iterable[Shape], grid_spacing_px: float
) -> List[SnapCandidate]:
    """Return every candidate for ``point`` in generation order (no dedup)."""

    snapshot: Tuple[Shape, ...] = tuple(shapes)
    candidates = [grid_candidate(point, grid_spacing_px)]
    for shape in snapshot:
        candidates.extend(_shape_candidates(shape))
    candidates.extend(line_intersections([s for s in snapshot if isinstance(s, Line)]))
    return candidates


def _nearest(point: Point2D, candidates: Sequence[SnapCandidate]) -> Tuple[int, float]:
    coords = np.array([(c.position.x, c.position.y) for c in candidates], dtype=float)
    dists = np.hypot(coords[:, 0] - point.x, coords[:, 1] - point.y)
    # argmin returns the first minimum, which fixes the tie-break order.
    idx = int(np.argmin(dists))
    return idx, float(dists[idx])


def find_snap_candidate(
    point: Point2D,
    shapes: Iterable[Shape],
    grid_spacing_px: float,
    zoom: float,
) -> Optional[SnapCandidate]:
    """Return the nearest candidate within the zoom-dependent radius, else ``None``."""

    candidates = generate_candidates(point, shapes, grid_spacing_px)
    radius = snap_radius(zoom)
    idx, best = _nearest(point, candidates)
    logger.debug(
        "snap query %r: %d candidates, nearest=%s at %.3f (radius %.3f)",
        point,
        len(candidates),
        candidates[idx].source.value,
        best,
        radius,
    )
    if best <= radius:
        return candidates[idx]
    return None


def snap_point(
    point: Point2D,
    shapes: Iterable[Shape],
    grid_spacing_px: float,
    zoom: float,
) -> Tuple[Point2D, bool]:
    """Like :func:`find_snap_candidate` but falls back to the raw point."""

    hit = find_snap_candidate(point, shapes, grid_spacing_px, zoom)
    if hit is None:
        return point, False
    return hit.position, True


apply_debug_logging(globals(), logger=logger, skip={"snap_radius", "grid_candidate"})


__all__ = [
    "SnapCandidate",
    "SnapSource",
    "find_snap_candidate",
    "generate_candidates",
    "grid_candidate",
    "line_intersections",
    "snap_point",
    "snap_radius",
]

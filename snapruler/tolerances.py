"""Numeric tolerances and clamps shared by the snapping layer."""

from __future__ import annotations

from typing import Tuple

# Squared segment length below which a line is treated as a single point.
DEGENERATE_LENGTH_SQ: float = 1e-12

# Cross-determinant threshold for parallel/coincident lines. Fixed, not scaled
# with coordinate magnitude.
PARALLEL_DENOM: float = 1e-6

MIN_GRID_SPACING_PX: float = 2.0
MIN_ZOOM: float = 0.1

SNAP_RADIUS_BASE_PX: float = 24.0
SNAP_RADIUS_MIN_PX: float = 8.0
SNAP_RADIUS_MAX_PX: float = 48.0

# Upper bound on sampled segment midpoints per poly-stroke.
POLYSTROKE_MIDPOINT_SAMPLES: int = 20

SNAP_ANGLES_DEG: Tuple[float, ...] = (0.0, 30.0, 45.0, 60.0, 90.0)
ANGLE_DETENT_DEG: float = 5.0

# Pinch range for compass radius, ruler length and set-square size.
GUIDE_EXTENT_MIN_PX: float = 10.0
GUIDE_EXTENT_MAX_PX: float = 2000.0

# Canvas viewport zoom range.
VIEW_ZOOM_MIN: float = 0.2
VIEW_ZOOM_MAX: float = 10.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


__all__ = [
    "ANGLE_DETENT_DEG",
    "DEGENERATE_LENGTH_SQ",
    "GUIDE_EXTENT_MAX_PX",
    "GUIDE_EXTENT_MIN_PX",
    "MIN_GRID_SPACING_PX",
    "MIN_ZOOM",
    "PARALLEL_DENOM",
    "POLYSTROKE_MIDPOINT_SAMPLES",
    "SNAP_ANGLES_DEG",
    "SNAP_RADIUS_BASE_PX",
    "SNAP_RADIUS_MAX_PX",
    "SNAP_RADIUS_MIN_PX",
    "VIEW_ZOOM_MAX",
    "VIEW_ZOOM_MIN",
    "clamp",
]

"""Detent behaviour for guide rotation gestures.

The candidate mark is picked from the angle folded into ``[0, 180)``. A
rotation whose raw angle lands within the detent window of that mark locks
onto it; anything else rotates freely.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .logging_utils import apply_debug_logging
from .tolerances import ANGLE_DETENT_DEG, SNAP_ANGLES_DEG

logger = logging.getLogger(__name__)


def normalize_half_turn(angle_deg: float) -> float:
    norm = angle_deg % 180.0
    if norm >= 180.0:
        # -tiny % 180 rounds up to 180.0
        norm = 0.0
    return norm


def nearest_mark(angle_deg: float, marks: Sequence[float] = SNAP_ANGLES_DEG) -> float:
    """Closest mark by absolute difference; the first listed mark wins ties."""

    return min(marks, key=lambda mark: abs(mark - angle_deg))


def snap_angle_deg(
    angle_deg: float,
    marks: Sequence[float] = SNAP_ANGLES_DEG,
    window_deg: float = ANGLE_DETENT_DEG,
) -> float:
    """Return the nearest mark when the raw angle is inside its window.

    The mark is chosen from the angle folded into ``[0, 180)``, but the window
    is measured against the raw angle, so 184 degrees stays 184 rather than
    locking to 0 or 180.
    """

    mark = nearest_mark(normalize_half_turn(angle_deg), marks)
    if abs(angle_deg - mark) <= window_deg:
        return mark
    return angle_deg


def snap_rotation(
    current_rad: float,
    delta_rad: float,
    marks: Sequence[float] = SNAP_ANGLES_DEG,
    window_deg: float = ANGLE_DETENT_DEG,
) -> float:
    """Apply a rotation delta and return the committed guide angle in radians."""

    raw = current_rad + delta_rad
    raw_deg = math.degrees(raw)
    snapped = snap_angle_deg(raw_deg, marks, window_deg)
    if snapped == raw_deg:
        return raw
    logger.debug("rotation detent: %.3f deg -> %.3f deg", raw_deg, snapped)
    return math.radians(snapped)


apply_debug_logging(globals(), logger=logger, skip={"normalize_half_turn", "nearest_mark"})


__all__ = [
    "nearest_mark",
    "normalize_half_turn",
    "snap_angle_deg",
    "snap_rotation",
]

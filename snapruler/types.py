from __future__ import annotations

from typing import Tuple

Coord = Tuple[float, float]


class SnapRulerError(RuntimeError):
    """Base class for session-level misuse of the drafting engine."""


class NoActiveStrokeError(SnapRulerError):
    """Raised when a stroke is extended before one has been started."""


class InvalidPointError(ValueError):
    """Raised when a point is built from NaN or infinite coordinates."""


__all__ = [
    "Coord",
    "InvalidPointError",
    "NoActiveStrokeError",
    "SnapRulerError",
]

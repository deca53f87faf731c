"""Manipulable drafting guides: ruler, protractor, set-square and compass.

Each guide is a dataclass variant of :class:`Guide` sharing an ``active`` flag
and a ``center`` pose. Gestures are applied through :func:`apply_gesture` and
point constraints through :func:`try_snap`. Only the ruler carries a point
constraint today; the other guides return the raw point unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .angles import snap_rotation
from .geometry import Point2D, polar_angle, translate, unit_vector
from .tolerances import GUIDE_EXTENT_MAX_PX, GUIDE_EXTENT_MIN_PX, clamp

logger = logging.getLogger(__name__)


class GuideKind(Enum):
    RULER = "ruler"
    SET_SQUARE = "set_square"
    PROTRACTOR = "protractor"
    COMPASS = "compass"


@dataclass(frozen=True)
class Gesture:
    """One transform-gesture sample: pan delta, rotation delta, pinch ratio."""

    pan: Tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    zoom: float = 1.0

    def __post_init__(self) -> None:
        dx, dy = (float(v) for v in self.pan)
        rotation = float(self.rotation)
        zoom = float(self.zoom)
        if not all(math.isfinite(v) for v in (dx, dy, rotation, zoom)):
            raise ValueError(f"non-finite gesture {self!r}")
        if zoom <= 0.0:
            raise ValueError(f"gesture zoom must be positive, got {zoom}")
        object.__setattr__(self, "pan", (dx, dy))
        object.__setattr__(self, "rotation", rotation)
        object.__setattr__(self, "zoom", zoom)

    @property
    def has_pan(self) -> bool:
        return self.pan != (0.0, 0.0)


def _scaled_extent(value: float, ratio: float) -> float:
    return clamp(value * ratio, GUIDE_EXTENT_MIN_PX, GUIDE_EXTENT_MAX_PX)


@dataclass
class Guide:
    """Common pose shared by every guide variant."""

    kind: ClassVar[GuideKind]

    center: Point2D = field(default_factory=lambda: Point2D(0.0, 0.0))
    active: bool = False

    def toggle(self) -> bool:
        self.active = not self.active
        logger.info("%s guide %s", self.kind.value, "activated" if self.active else "deactivated")
        return self.active

    def apply_gesture(self, gesture: Gesture) -> None:
        if not self.active:
            return
        if gesture.has_pan:
            self.center = translate(self.center, *gesture.pan)
        if gesture.rotation != 0.0:
            self._rotate(gesture.rotation)
        if gesture.zoom != 1.0:
            self._scale(gesture.zoom)

    def _rotate(self, delta_rad: float) -> None:
        pass

    def _scale(self, ratio: float) -> None:
        pass

    def snap(self, point: Point2D) -> Tuple[Point2D, bool]:
        return point, False


@dataclass
class RulerGuide(Guide):
    """Straightedge. When active it hard-constrains points onto its axis."""

    kind: ClassVar[GuideKind] = GuideKind.RULER

    center: Point2D = field(default_factory=lambda: Point2D(400.0, 400.0))
    active: bool = True
    angle_rad: float = 0.0
    length_px: float = 200.0
    width_px: float = 24.0
    last_snap: Optional[Point2D] = None

    def _rotate(self, delta_rad: float) -> None:
        self.angle_rad = snap_rotation(self.angle_rad, delta_rad)

    def _scale(self, ratio: float) -> None:
        self.length_px = _scaled_extent(self.length_px, ratio)

    def direction(self) -> Point2D:
        return unit_vector(self.angle_rad)

    def snap(self, point: Point2D) -> Tuple[Point2D, bool]:
        """Project ``point`` onto the ruler axis, clamped to the ruler's extent.

        No distance threshold applies: an active ruler always wins.
        """

        if not self.active or self.length_px <= 0.0:
            self.last_snap = None
            return point, False
        u = self.direction()
        half = self.length_px / 2.0
        offset = (point.x - self.center.x) * u.x + (point.y - self.center.y) * u.y
        # NaN from overflowing offsets clamps to the far tip
        t = clamp(offset, -half, half)
        projected = Point2D(self.center.x + u.x * t, self.center.y + u.y * t)
        self.last_snap = projected
        return projected, True

    def endpoints(self) -> Tuple[Point2D, Point2D]:
        u = self.direction() * (self.length_px / 2.0)
        return self.center - u, self.center + u

    def corners(self) -> List[Point2D]:
        """Body rectangle corners, counter-clockwise from the start tip."""

        u = self.direction()
        v = Point2D(-u.y, u.x)
        half_l = self.length_px / 2.0
        half_w = self.width_px / 2.0
        c = self.center
        return [
            c + u * -half_l + v * -half_w,
            c + u * half_l + v * -half_w,
            c + u * half_l + v * half_w,
            c + u * -half_l + v * half_w,
        ]


@dataclass
class ProtractorGuide(Guide):
    """Measures the non-reflex angle between two rays around ``center``."""

    kind: ClassVar[GuideKind] = GuideKind.PROTRACTOR

    center: Point2D = field(default_factory=lambda: Point2D(500.0, 500.0))
    first_ray: Optional[Point2D] = None
    second_ray: Optional[Point2D] = None

    def set_rays(self, first: Optional[Point2D], second: Optional[Point2D]) -> None:
        self.first_ray = first
        self.second_ray = second

    def clear_rays(self) -> None:
        self.set_rays(None, None)

    def angle_degrees(self) -> Optional[float]:
        if self.first_ray is None or self.second_ray is None:
            return None
        diff = polar_angle(self.center, self.second_ray) - polar_angle(self.center, self.first_ray)
        deg = math.degrees(diff) % 360.0
        if deg > 180.0:
            deg = 360.0 - deg
        return deg

    def rounded_angle(self) -> Optional[int]:
        """Angle rounded to a whole degree, for display."""

        deg = self.angle_degrees()
        return None if deg is None else int(round(deg))


class SetSquareVariant(Enum):
    RIGHT_45 = "right_45"
    RIGHT_30_60_90 = "right_30_60_90"


_SQRT3 = math.sqrt(3.0)


@dataclass
class SetSquareGuide(Guide):
    """Right-triangle template; its longest edge is the highlighted edge."""

    kind: ClassVar[GuideKind] = GuideKind.SET_SQUARE

    center: Point2D = field(default_factory=lambda: Point2D(300.0, 300.0))
    angle_rad: float = 0.0
    size_px: float = 220.0
    variant: SetSquareVariant = SetSquareVariant.RIGHT_45

    def _rotate(self, delta_rad: float) -> None:
        self.angle_rad = snap_rotation(self.angle_rad, delta_rad)

    def _scale(self, ratio: float) -> None:
        self.size_px = _scaled_extent(self.size_px, ratio)

    def local_vertices(self) -> np.ndarray:
        size = self.size_px
        leg_x = size * _SQRT3 if self.variant is SetSquareVariant.RIGHT_30_60_90 else size
        return np.array([[0.0, 0.0], [leg_x, 0.0], [0.0, size]], dtype=float)

    def world_vertices(self) -> List[Point2D]:
        cos_a = math.cos(self.angle_rad)
        sin_a = math.sin(self.angle_rad)
        rot = np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)
        world = self.local_vertices() @ rot.T + np.array([self.center.x, self.center.y])
        return [Point2D(float(x), float(y)) for x, y in world]

    def edges(self) -> List[Tuple[Point2D, Point2D]]:
        v = self.world_vertices()
        return [(v[0], v[1]), (v[1], v[2]), (v[2], v[0])]

    def edge_lengths(self) -> List[float]:
        return [math.hypot(b.x - a.x, b.y - a.y) for a, b in self.edges()]

    def active_edge_index(self) -> int:
        lengths = self.edge_lengths()
        return lengths.index(max(lengths))

    def active_edge(self) -> Tuple[Point2D, Point2D]:
        return self.edges()[self.active_edge_index()]


@dataclass
class CompassGuide(Guide):
    kind: ClassVar[GuideKind] = GuideKind.COMPASS

    center: Point2D = field(default_factory=lambda: Point2D(600.0, 600.0))
    radius: float = 120.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0.0:
            raise ValueError(f"compass radius must be positive, got {self.radius!r}")

    def _scale(self, ratio: float) -> None:
        self.radius = _scaled_extent(self.radius, ratio)

    def handle(self) -> Point2D:
        """Radius handle on the positive x side of the circle."""

        return Point2D(self.center.x + self.radius, self.center.y)


def apply_gesture(guide: Guide, gesture: Gesture) -> None:
    guide.apply_gesture(gesture)


def try_snap(guide: Guide, point: Point2D) -> Tuple[Point2D, bool]:
    return guide.snap(point)


@dataclass
class GuideSet:
    """The four session guides, queried in a fixed order."""

    ruler: RulerGuide = field(default_factory=RulerGuide)
    set_square: SetSquareGuide = field(default_factory=SetSquareGuide)
    protractor: ProtractorGuide = field(default_factory=ProtractorGuide)
    compass: CompassGuide = field(default_factory=CompassGuide)

    def __iter__(self) -> Iterator[Guide]:
        yield self.ruler
        yield self.set_square
        yield self.protractor
        yield self.compass

    def by_kind(self) -> Dict[GuideKind, Guide]:
        return {guide.kind: guide for guide in self}

    def get(self, kind: GuideKind) -> Guide:
        return self.by_kind()[kind]

    def active(self) -> List[Guide]:
        return [guide for guide in self if guide.active]

    def constrain(self, point: Point2D) -> Tuple[Point2D, Optional[Guide]]:
        """Return the first hard-constraint result, or ``point`` untouched.

        Every guide is asked so that derived state such as the ruler's
        ``last_snap`` stays current.
        """

        result: Tuple[Point2D, Optional[Guide]] = (point, None)
        for guide in self:
            snapped, hit = try_snap(guide, point)
            if hit and result[1] is None:
                result = (snapped, guide)
        return result


__all__ = [
    "CompassGuide",
    "Gesture",
    "Guide",
    "GuideKind",
    "GuideSet",
    "ProtractorGuide",
    "RulerGuide",
    "SetSquareGuide",
    "SetSquareVariant",
    "apply_gesture",
    "try_snap",
]

"""Pointer pipeline tying guides, the snap engine and the shape catalog together.

Each pointer sample goes through the active guides first (hard constraints),
then through the snap candidate engine, and the result is appended to the
in-progress stroke. Everything runs synchronously in pointer-event order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .config import SnapSettings, get_default_settings
from .geometry import Point2D, PointLike, as_point, distance
from .guides import Gesture, GuideKind, GuideSet, apply_gesture
from .shapes import CatalogSnapshot, PolyStroke, Shape, ShapeCatalog
from .snapping import SnapCandidate, find_snap_candidate
from .tolerances import VIEW_ZOOM_MAX, VIEW_ZOOM_MIN, clamp
from .types import NoActiveStrokeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPoint:
    """Outcome of running one raw sample through the pipeline."""

    point: Point2D
    raw: Point2D
    guide: Optional[GuideKind] = None
    snap: Optional[SnapCandidate] = None

    @property
    def constrained(self) -> bool:
        return self.guide is not None

    @property
    def snapped(self) -> bool:
        return self.snap is not None


@dataclass(frozen=True)
class Readout:
    """Values for the precision HUD; ``None`` where nothing is measurable."""

    length_px: Optional[float]
    length_mm: Optional[float]
    angle_deg: Optional[float]

    def format(self) -> str:
        length = "--" if self.length_mm is None else f"{self.length_mm:.1f} mm"
        angle = "--" if self.angle_deg is None else f"{round(self.angle_deg):d}\N{DEGREE SIGN}"
        return f"L: {length}   A: {angle}"


def _as_kind(kind: Union[GuideKind, str]) -> GuideKind:
    if isinstance(kind, GuideKind):
        return kind
    try:
        return GuideKind(kind)
    except ValueError:
        raise ValueError(f"unknown guide kind {kind!r}") from None


class DraftingSession:
    def __init__(
        self,
        catalog: Optional[ShapeCatalog] = None,
        guides: Optional[GuideSet] = None,
        settings: Optional[SnapSettings] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else ShapeCatalog()
        self.guides = guides if guides is not None else GuideSet()
        self.settings = settings if settings is not None else get_default_settings()
        self.view_translation: Tuple[float, float] = (0.0, 0.0)

    def _snap_targets(self) -> List[Shape]:
        # the stroke being drawn is never its own snap target
        active = self.catalog.active_stroke
        return [shape for shape in self.catalog if shape is not active]

    def resolve(self, raw: Point2D) -> ResolvedPoint:
        point, guide = self.guides.constrain(raw)
        snap: Optional[SnapCandidate] = None
        if self.settings.snap_enabled:
            snap = find_snap_candidate(
                point,
                self._snap_targets(),
                self.settings.grid_spacing_px,
                self.settings.zoom,
            )
            if snap is not None:
                point = snap.position
        return ResolvedPoint(
            point=point,
            raw=raw,
            guide=guide.kind if guide is not None else None,
            snap=snap,
        )

    def _accept_sample(self, sample: PointLike) -> Optional[Point2D]:
        try:
            return as_point(sample)
        except (ValueError, TypeError) as exc:
            logger.warning("Dropping pointer sample %r: %s", sample, exc)
            return None

    def begin_stroke(self, sample: PointLike) -> Optional[ResolvedPoint]:
        raw = self._accept_sample(sample)
        if raw is None:
            return None
        resolved = self.resolve(raw)
        self.catalog.begin_stroke(resolved.point)
        return resolved

    def extend_stroke(self, sample: PointLike) -> Optional[ResolvedPoint]:
        if self.catalog.active_stroke is None:
            raise NoActiveStrokeError("extend_stroke called before begin_stroke")
        raw = self._accept_sample(sample)
        if raw is None:
            return None
        resolved = self.resolve(raw)
        self.catalog.add_point(resolved.point)
        return resolved

    def end_stroke(self) -> Optional[PolyStroke]:
        return self.catalog.end_stroke()

    def draw_stroke(self, samples: Sequence[PointLike]) -> Optional[PolyStroke]:
        """Feed a whole down/move/up sequence; returns the committed stroke."""

        started = False
        for sample in samples:
            if not started:
                started = self.begin_stroke(sample) is not None
            else:
                self.extend_stroke(sample)
        return self.end_stroke() if started else None

    def toggle_guide(self, kind: Union[GuideKind, str]) -> bool:
        return self.guides.get(_as_kind(kind)).toggle()

    def apply_guide_gesture(self, kind: Union[GuideKind, str], gesture: Gesture) -> None:
        apply_gesture(self.guides.get(_as_kind(kind)), gesture)

    def zoom_by(self, ratio: float) -> float:
        self.settings.zoom = clamp(self.settings.zoom * ratio, VIEW_ZOOM_MIN, VIEW_ZOOM_MAX)
        return self.settings.zoom

    def pan_by(self, dx: float, dy: float) -> Tuple[float, float]:
        tx, ty = self.view_translation
        self.view_translation = (tx + dx, ty + dy)
        return self.view_translation

    def screen_to_canvas(self, sample: PointLike) -> Point2D:
        """Map a screen position into canvas coordinates.

        The view is drawn as ``screen = translation + zoom * canvas``, so this
        is its inverse. Pointer samples are resolved in canvas coordinates.
        """

        p = as_point(sample)
        tx, ty = self.view_translation
        zoom = self.settings.effective_zoom
        return Point2D((p.x - tx) / zoom, (p.y - ty) / zoom)

    def readout(self) -> Readout:
        stroke = self.catalog.active_stroke
        if stroke is None and len(self.catalog) and isinstance(self.catalog[-1], PolyStroke):
            stroke = self.catalog[-1]
        length_px: Optional[float] = None
        length_mm: Optional[float] = None
        if stroke is not None and stroke.points:
            length_px = distance(stroke.points[0], stroke.points[-1])
            if self.settings.px_per_mm > 0:
                length_mm = length_px / self.settings.px_per_mm
        protractor = self.guides.protractor
        angle = protractor.angle_degrees() if protractor.active else None
        return Readout(length_px=length_px, length_mm=length_mm, angle_deg=angle)

    def snapshot(self) -> CatalogSnapshot:
        return self.catalog.snapshot()

    def restore(self, snapshot: Sequence[Shape]) -> None:
        self.catalog.restore(snapshot)


__all__ = ["DraftingSession", "Readout", "ResolvedPoint"]

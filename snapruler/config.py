"""Caller-supplied knobs for a drafting session."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .tolerances import MIN_GRID_SPACING_PX, MIN_ZOOM

MM_PER_INCH = 25.4
DEFAULT_GRID_MM = 5.0
MIN_RENDERED_GRID_PX = 4.0


@dataclass
class SnapSettings:
    """Session configuration.

    ``grid_spacing_px`` and ``zoom`` feed the snap engine, which floors them at
    2 px and 0.1 respectively. ``stroke_color`` and ``stroke_width_px`` are
    passed through to the renderer and have no geometric effect.
    ``px_per_mm`` converts pixel lengths for the measurement readout.
    """

    grid_spacing_px: float = 20.0
    zoom: float = 1.0
    stroke_color: str = "#000000"
    stroke_width_px: float = 3.0
    snap_enabled: bool = True
    px_per_mm: float = 4.0

    @property
    def effective_grid_spacing(self) -> float:
        return max(float(self.grid_spacing_px), MIN_GRID_SPACING_PX)

    @property
    def effective_zoom(self) -> float:
        return max(float(self.zoom), MIN_ZOOM)


def grid_spacing_for_dpi(dpi: float, mm: float = DEFAULT_GRID_MM) -> float:
    """Pixel spacing of a ``mm`` millimetre grid at ``dpi``; never below 4 px."""

    if dpi <= 0:
        raise ValueError(f"dpi must be positive, got {dpi}")
    return max(dpi * mm / MM_PER_INCH, MIN_RENDERED_GRID_PX)


_DEFAULT_SETTINGS = SnapSettings()


def get_default_settings() -> SnapSettings:
    return copy.deepcopy(_DEFAULT_SETTINGS)


def set_default_settings(settings: SnapSettings) -> None:
    global _DEFAULT_SETTINGS
    _DEFAULT_SETTINGS = copy.deepcopy(settings)


__all__ = [
    "SnapSettings",
    "get_default_settings",
    "grid_spacing_for_dpi",
    "set_default_settings",
]

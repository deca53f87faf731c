from .geometry import (
    Point2D,
    angle_between,
    as_point,
    distance,
    line_intersection,
    midpoint,
    project_point_on_line,
)
from .shapes import Circle, Line, PolyStroke, Shape, ShapeCatalog, make_circle, make_line, make_stroke
from .snapping import (
    SnapCandidate,
    SnapSource,
    find_snap_candidate,
    generate_candidates,
    grid_candidate,
    snap_point,
    snap_radius,
)
from .angles import nearest_mark, normalize_half_turn, snap_angle_deg, snap_rotation
from .guides import (
    CompassGuide,
    Gesture,
    Guide,
    GuideKind,
    GuideSet,
    ProtractorGuide,
    RulerGuide,
    SetSquareGuide,
    SetSquareVariant,
    apply_gesture,
    try_snap,
)
from .config import SnapSettings, get_default_settings, grid_spacing_for_dpi, set_default_settings
from .session import DraftingSession, Readout, ResolvedPoint
from .types import InvalidPointError, NoActiveStrokeError, SnapRulerError

__all__ = [
    'Point2D',
    'angle_between',
    'as_point',
    'distance',
    'line_intersection',
    'midpoint',
    'project_point_on_line',
    'Circle',
    'Line',
    'PolyStroke',
    'Shape',
    'ShapeCatalog',
    'make_circle',
    'make_line',
    'make_stroke',
    'SnapCandidate',
    'SnapSource',
    'find_snap_candidate',
    'generate_candidates',
    'grid_candidate',
    'snap_point',
    'snap_radius',
    'nearest_mark',
    'normalize_half_turn',
    'snap_angle_deg',
    'snap_rotation',
    'CompassGuide',
    'Gesture',
    'Guide',
    'GuideKind',
    'GuideSet',
    'ProtractorGuide',
    'RulerGuide',
    'SetSquareGuide',
    'SetSquareVariant',
    'apply_gesture',
    'try_snap',
    'SnapSettings',
    'get_default_settings',
    'grid_spacing_for_dpi',
    'set_default_settings',
    'DraftingSession',
    'Readout',
    'ResolvedPoint',
    'InvalidPointError',
    'NoActiveStrokeError',
    'SnapRulerError',
]

import argparse
import logging
import math
import sys
from typing import List, Optional, Sequence, Tuple

from snapruler import (
    DraftingSession,
    GuideSet,
    Point2D,
    ProtractorGuide,
    RulerGuide,
    ShapeCatalog,
    SnapSettings,
    make_line,
    make_stroke,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _floats(text: str, count: Optional[int] = None) -> List[float]:
    parts = [part.strip() for part in text.split(",") if part.strip()]
    if count is not None and len(parts) != count:
        raise argparse.ArgumentTypeError(f"expected {count} comma-separated numbers, got {text!r}")
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number list: {text!r}") from None
    if not all(math.isfinite(v) for v in values):
        raise argparse.ArgumentTypeError(f"non-finite value in {text!r}")
    return values


def _point_arg(text: str) -> Tuple[float, float]:
    x, y = _floats(text, 2)
    return (x, y)


def _line_arg(text: str):
    x1, y1, x2, y2 = _floats(text, 4)
    return make_line((x1, y1), (x2, y2))


def _stroke_arg(text: str):
    points = [_point_arg(chunk) for chunk in text.split(";") if chunk.strip()]
    if not points:
        raise argparse.ArgumentTypeError("stroke needs at least one x,y point")
    return make_stroke(points)


def _ruler_arg(text: str) -> RulerGuide:
    cx, cy, deg, length = _floats(text, 4)
    return RulerGuide(center=Point2D(cx, cy), angle_rad=math.radians(deg), length_px=length, active=True)


def _run_snap(args: argparse.Namespace) -> None:
    catalog = ShapeCatalog(list(args.line) + list(args.stroke))
    ruler = args.ruler if args.ruler is not None else RulerGuide(active=False)
    settings = SnapSettings(
        grid_spacing_px=args.grid,
        zoom=args.zoom,
        snap_enabled=not args.no_snap,
    )
    session = DraftingSession(catalog=catalog, guides=GuideSet(ruler=ruler), settings=settings)
    logger.info("Resolving (%s, %s) against %d shape(s)", args.x, args.y, len(catalog))

    resolved = session.resolve(Point2D(args.x, args.y))
    if resolved.snap is not None:
        source = resolved.snap.source.value
    elif resolved.guide is not None:
        source = resolved.guide.value
    else:
        source = "raw"

    print(f"point: ({resolved.point.x:.6f}, {resolved.point.y:.6f})")
    print(f"source: {source}")
    if resolved.guide is not None:
        print(f"constrained by: {resolved.guide.value}")


def _run_angle(args: argparse.Namespace) -> None:
    protractor = ProtractorGuide(center=Point2D(*args.center), active=True)
    protractor.set_rays(Point2D(*args.first), Point2D(*args.second))
    angle = protractor.angle_degrees()
    print(f"angle: {angle:.6f}")
    print(f"display: {protractor.rounded_angle()}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Query the snapruler drafting engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    snap = sub.add_parser("snap", help="Resolve a pointer position")
    snap.add_argument("x", type=float)
    snap.add_argument("y", type=float)
    snap.add_argument("--grid", type=float, default=20.0, help="Grid spacing in px (default: 20)")
    snap.add_argument("--zoom", type=float, default=1.0, help="Zoom factor (default: 1)")
    snap.add_argument(
        "--line",
        type=_line_arg,
        action="append",
        default=[],
        help="Line shape as x1,y1,x2,y2 (repeatable)",
    )
    snap.add_argument(
        "--stroke",
        type=_stroke_arg,
        action="append",
        default=[],
        help="Poly-stroke as 'x,y;x,y;...' (repeatable)",
    )
    snap.add_argument("--ruler", type=_ruler_arg, help="Active ruler as cx,cy,angle_deg,length")
    snap.add_argument("--no-snap", action="store_true", help="Disable candidate snapping")
    snap.set_defaults(func=_run_snap)

    angle = sub.add_parser("angle", help="Measure a protractor angle")
    angle.add_argument("center", type=_point_arg)
    angle.add_argument("first", type=_point_arg)
    angle.add_argument("second", type=_point_arg)
    angle.set_defaults(func=_run_angle)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if not (math.isfinite(getattr(args, "x", 0.0)) and math.isfinite(getattr(args, "y", 0.0))):
        parser.error("pointer coordinates must be finite")

    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])

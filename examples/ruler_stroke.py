"""Example session: draw against the ruler, then snap onto the committed stroke."""

import math

from snapruler import DraftingSession, Gesture, GuideKind, make_line

SAMPLES = [(310.0, 396.0), (342.5, 407.0), (377.0, 391.5), (418.0, 403.0), (455.0, 412.0)]


def main() -> None:
    session = DraftingSession()
    session.catalog.append(make_line((300.0, 300.0), (500.0, 500.0)))

    # rotate the ruler by 28 degrees; the 30 degree detent takes over
    session.apply_guide_gesture(GuideKind.RULER, Gesture(rotation=math.radians(28.0)))
    print(f"Ruler angle: {math.degrees(session.guides.ruler.angle_rad):.1f} deg")

    print("Ruler stroke:")
    session.begin_stroke(SAMPLES[0])
    for sample in SAMPLES[1:]:
        resolved = session.extend_stroke(sample)
        source = resolved.snap.source.value if resolved.snap else "ruler"
        print(f"  {sample} -> ({resolved.point.x:.2f}, {resolved.point.y:.2f}) [{source}]")
    stroke = session.end_stroke()
    print(f"Committed {len(stroke)} points")

    session.toggle_guide(GuideKind.RULER)
    resolved = session.resolve(session.catalog.shapes[-1].last)
    print(f"Free pointer on the stroke end snaps to {resolved.snap.source.value}")

    print("Readout:", session.readout().format())


if __name__ == "__main__":
    main()

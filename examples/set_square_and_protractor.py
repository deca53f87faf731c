"""Example: pose a 30-60-90 set-square and read a protractor angle."""

import math

from snapruler import (
    DraftingSession,
    Gesture,
    GuideKind,
    Point2D,
    SetSquareVariant,
)


def main() -> None:
    session = DraftingSession()
    square = session.guides.set_square
    square.variant = SetSquareVariant.RIGHT_30_60_90
    session.toggle_guide(GuideKind.SET_SQUARE)
    session.apply_guide_gesture(
        GuideKind.SET_SQUARE,
        Gesture(pan=(40.0, -20.0), rotation=math.radians(58.0), zoom=0.5),
    )

    print(f"Set-square angle: {math.degrees(square.angle_rad):.1f} deg, size {square.size_px:.1f} px")
    for i, vertex in enumerate(square.world_vertices()):
        print(f"  v{i}: ({vertex.x:.2f}, {vertex.y:.2f})")
    start, end = square.active_edge()
    print(f"Highlighted edge: {start} -> {end}")

    protractor = session.guides.protractor
    session.toggle_guide(GuideKind.PROTRACTOR)
    c = protractor.center
    protractor.set_rays(Point2D(c.x + 100.0, c.y), Point2D(c.x + 50.0, c.y + 86.6))
    print(f"Protractor: {protractor.angle_degrees():.3f} deg (display {protractor.rounded_angle()})")
    print("Readout:", session.readout().format())


if __name__ == "__main__":
    main()

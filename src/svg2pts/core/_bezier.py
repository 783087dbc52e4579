"""Internal Bezier subdivision helpers.

This is an internal module containing helper functions for flatten.
Not intended for public use.
"""

import math

from svg2pts.domain import Point


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to the closed segment seg_start -> seg_end.

    A zero-length segment degrades to the distance between two points.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def flatness(points: tuple[Point, ...]) -> float:
    """Largest distance from an interior control point to the chord.

    The curve lies in the convex hull of its control polygon, so this value
    bounds the distance between the curve and the chord joining its endpoints.

    Args:
        points: Control polygon [p0, ..., pn]

    Returns:
        Flatness estimate (0.0 when every control point lies on the chord)
    """
    start = points[0]
    end = points[-1]
    return max(
        (distance_to_segment(p, start, end) for p in points[1:-1]),
        default=0.0,
    )


def split_quadratic(
    points: tuple[Point, ...],
) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
    """Split a quadratic Bezier at t=0.5.

    Args:
        points: Control points (p0, p1, p2)

    Returns:
        Control points of the left and right halves
    """
    p0, p1, p2 = points

    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    return (p0, q1, mid), (mid, r1, p2)


def split_cubic(
    points: tuple[Point, ...],
) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
    """Split a cubic Bezier at t=0.5 using De Casteljau's algorithm.

    Args:
        points: Control points (p0, p1, p2, p3)

    Returns:
        Control points of the left and right halves
    """
    p0, p1, p2, p3 = points

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (curve point at t=0.5)
    mid = _midpoint(r1, r2)

    return (p0, q1, r1, mid), (mid, r2, q3, p3)


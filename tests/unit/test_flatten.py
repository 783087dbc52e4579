"""Unit tests for curve flattening."""

import math

import pytest

from svg2pts.core._bezier import (
    distance_to_segment,
    flatness,
    split_cubic,
    split_quadratic,
)
from svg2pts.core.flatten import MAX_SUBDIVISION_DEPTH, flatten, flatten_path
from svg2pts.domain import Cubic, Line, Path, Point, Quadratic
from svg2pts.exceptions import InvalidConfigurationError

# Symmetric arc from (0,0) to (10,0) bulging up to y=7.5
ARC = Cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))


def evaluate(points: tuple[Point, ...], t: float) -> Point:
    """Point at parameter t on a Bezier curve of any degree."""
    current = list(points)
    while len(current) > 1:
        current = [a.lerp(b, t) for a, b in zip(current, current[1:])]
    return current[0]


def max_deviation(segment, polyline: list[Point], samples: int = 400) -> float:
    """Largest distance from a sampled curve point to the polyline."""
    worst = 0.0
    for i in range(samples + 1):
        on_curve = evaluate(segment.points, i / samples)
        nearest = min(
            distance_to_segment(on_curve, a, b) for a, b in zip(polyline, polyline[1:])
        )
        worst = max(worst, nearest)
    return worst


class TestBezierHelpers:
    """Tests for the subdivision helpers."""

    def test_distance_to_segment_interior(self) -> None:
        """Perpendicular distance when the projection falls inside."""
        assert distance_to_segment(Point(5, 3), Point(0, 0), Point(10, 0)) == 3.0

    def test_distance_to_segment_clamped(self) -> None:
        """Distance to the nearest endpoint when projecting outside."""
        assert distance_to_segment(Point(13, 4), Point(0, 0), Point(10, 0)) == 5.0

    def test_distance_to_degenerate_segment(self) -> None:
        """A zero-length segment degrades to point distance."""
        assert distance_to_segment(Point(3, 4), Point(0, 0), Point(0, 0)) == 5.0

    def test_flatness_of_collinear_polygon(self) -> None:
        """Control points on the chord give zero flatness."""
        assert flatness((Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))) == 0.0

    def test_flatness_of_arc(self) -> None:
        """Flatness is the furthest control point from the chord."""
        assert flatness(ARC.points) == 10.0

    def test_split_cubic_halves_meet_on_curve(self) -> None:
        """Both halves share the curve point at t=0.5."""
        left, right = split_cubic(ARC.points)
        assert left[0] == ARC.start
        assert right[-1] == ARC.end
        assert left[-1] == right[0] == Point(5.0, 7.5)

    def test_split_quadratic_halves_meet_on_curve(self) -> None:
        """Both halves share the curve point at t=0.5."""
        points = (Point(0, 0), Point(5, 10), Point(10, 0))
        left, right = split_quadratic(points)
        assert left[-1] == right[0] == evaluate(points, 0.5) == Point(5.0, 5.0)


class TestFlattenLine:
    """Tests for line segments."""

    @pytest.mark.parametrize("accuracy", [0.0, 0.001, 0.1, 100.0])
    def test_line_identity(self, accuracy: float) -> None:
        """A line always flattens to exactly its two endpoints."""
        line = Line(Point(0, 0), Point(3, 4))
        assert flatten(line, accuracy) == [Point(0, 0), Point(3, 4)]


class TestFlattenCurves:
    """Tests for adaptive subdivision of curves."""

    def test_symmetric_arc_endpoints(self) -> None:
        """The arc starts at (0,0) and ends at (10,0)."""
        points = flatten(ARC, 0.05)
        assert points[0] == Point(0, 0)
        assert points[-1] == Point(10, 0)
        assert len(points) > 2

    @pytest.mark.parametrize("accuracy", [1.0, 0.25, 0.05, 0.001])
    def test_cubic_accuracy_bound(self, accuracy: float) -> None:
        """Every curve point lies within accuracy of the polyline."""
        points = flatten(ARC, accuracy)
        assert max_deviation(ARC, points) <= accuracy + 1e-9

    @pytest.mark.parametrize("accuracy", [0.5, 0.05, 0.005])
    def test_quadratic_accuracy_bound(self, accuracy: float) -> None:
        """Every curve point lies within accuracy of the polyline."""
        quad = Quadratic(Point(-3, 2), Point(4, 12), Point(9, -1))
        points = flatten(quad, accuracy)
        assert points[0] == quad.start
        assert points[-1] == quad.end
        assert max_deviation(quad, points) <= accuracy + 1e-9

    def test_s_curve_accuracy_bound(self) -> None:
        """Inflected curves with control points past the chord stay bounded."""
        s_curve = Cubic(Point(0, 0), Point(20, 15), Point(-10, 15), Point(10, 0))
        points = flatten(s_curve, 0.01)
        assert max_deviation(s_curve, points) <= 0.01 + 1e-9

    def test_points_in_curve_order(self) -> None:
        """Points come out in increasing curve parameter.

        x(t) is monotonic for the symmetric arc, so x must not decrease.
        """
        xs = [p.x for p in flatten(ARC, 0.01)]
        assert xs == sorted(xs)

    def test_tighter_accuracy_adds_points(self) -> None:
        """Smaller tolerance never yields fewer points."""
        assert len(flatten(ARC, 0.001)) > len(flatten(ARC, 0.1)) > 2

    def test_no_consecutive_duplicates(self) -> None:
        """Adjacent output points are distinct."""
        points = flatten(ARC, 0.001)
        assert all(a != b for a, b in zip(points, points[1:]))

    @pytest.mark.parametrize(
        "segment",
        [
            Cubic(Point(2, 2), Point(2, 2), Point(2, 2), Point(2, 2)),
            Quadratic(Point(2, 2), Point(2, 2), Point(2, 2)),
        ],
    )
    def test_degenerate_collapse(self, segment) -> None:
        """A curve with coincident control points is a single point."""
        assert flatten(segment, 0.01) == [Point(2, 2)]

    def test_collinear_cubic(self) -> None:
        """Control points on the chord need no subdivision."""
        cubic = Cubic(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))
        assert flatten(cubic, 0.0) == [Point(0, 0), Point(3, 0)]

    def test_collinear_quadratic(self) -> None:
        """Control point on the chord needs no subdivision."""
        quad = Quadratic(Point(0, 0), Point(5, 5), Point(10, 10))
        assert flatten(quad, 0.01) == [Point(0, 0), Point(10, 10)]

    def test_closed_loop_curve(self) -> None:
        """A curve returning to its start is still subdivided."""
        loop = Cubic(Point(0, 0), Point(10, 10), Point(-10, 10), Point(0, 0))
        points = flatten(loop, 0.05)
        assert points[0] == points[-1] == Point(0, 0)
        assert len(points) > 3
        assert max_deviation(loop, points) <= 0.05 + 1e-9

    def test_zero_accuracy_terminates_at_depth_cap(self) -> None:
        """Exceeding the depth cap accepts leaves instead of looping."""
        quad = Quadratic(Point(0, 0), Point(5, 10), Point(10, 0))
        points = flatten(quad, 0.0)
        assert points[-1] == quad.end
        assert len(points) <= 2**MAX_SUBDIVISION_DEPTH + 1

    def test_nan_propagates(self) -> None:
        """NaN coordinates are passed through, not rejected."""
        cubic = Cubic(Point(0, 0), Point(math.nan, 1), Point(2, 1), Point(3, 0))
        points = flatten(cubic, 0.1)
        assert points == [Point(0, 0), Point(3, 0)]

    def test_negative_accuracy_rejected(self) -> None:
        """Negative accuracy is a configuration error."""
        with pytest.raises(InvalidConfigurationError, match="accuracy"):
            flatten(ARC, -0.1)


class TestFlattenPath:
    """Tests for whole-path flattening."""

    def test_empty_path_is_start_point(self) -> None:
        """A lone moveto yields its start point."""
        assert flatten_path(Path(start=Point(1, 1)), 0.1) == [Point(1, 1)]

    def test_shared_endpoints_emitted_once(self) -> None:
        """Segment boundaries are not duplicated."""
        path = Path(
            start=Point(0, 0),
            segments=[
                Line(Point(0, 0), Point(10, 0)),
                Line(Point(10, 0), Point(10, 10)),
                Line(Point(10, 10), Point(0, 0)),
            ],
            closed=True,
        )
        assert flatten_path(path, 0.1) == [
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
            Point(0, 0),
        ]

    def test_zero_length_segments_dropped(self) -> None:
        """Zero-length lines and curves add no points."""
        path = Path(
            start=Point(0, 0),
            segments=[
                Line(Point(0, 0), Point(0, 0)),
                Line(Point(0, 0), Point(5, 0)),
                Cubic(Point(5, 0), Point(5, 0), Point(5, 0), Point(5, 0)),
                Line(Point(5, 0), Point(5, 5)),
            ],
        )
        assert flatten_path(path, 0.1) == [Point(0, 0), Point(5, 0), Point(5, 5)]

    def test_mixed_segments(self) -> None:
        """Curve points follow line points without gaps."""
        path = Path(start=Point(-5, 0), segments=[Line(Point(-5, 0), Point(0, 0)), ARC])
        points = flatten_path(path, 0.05)
        assert points[:2] == [Point(-5, 0), Point(0, 0)]
        assert points[2:] == flatten(ARC, 0.05)[1:]

    def test_negative_accuracy_rejected(self) -> None:
        """Negative accuracy is rejected even for paths without curves."""
        with pytest.raises(InvalidConfigurationError):
            flatten_path(Path(start=Point(0, 0)), -1.0)

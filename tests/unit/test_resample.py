"""Unit tests for arc-length resampling."""

import math

import pytest

from svg2pts.core._bezier import distance_to_segment
from svg2pts.core.flatten import flatten
from svg2pts.core.resample import polyline_length, resample
from svg2pts.domain import Cubic, Point
from svg2pts.exceptions import InvalidConfigurationError


def spacing(points: list[Point]) -> list[float]:
    return [a.distance_to(b) for a, b in zip(points, points[1:])]


def arc_positions(polyline: list[Point], points: list[Point]) -> list[float]:
    """Distance along the polyline of each point, scanning segments forward."""
    offsets = [0.0]
    for a, b in zip(polyline, polyline[1:]):
        offsets.append(offsets[-1] + a.distance_to(b))
    positions = []
    index = 0
    for p in points:
        while distance_to_segment(p, polyline[index], polyline[index + 1]) > 1e-9:
            index += 1
            assert index < len(polyline) - 1, f"{p} is not on the polyline"
        positions.append(offsets[index] + polyline[index].distance_to(p))
    return positions


class TestPolylineLength:
    """Tests for polyline_length."""

    def test_length(self) -> None:
        """Sums segment lengths."""
        points = [Point(0, 0), Point(3, 4), Point(3, 10)]
        assert polyline_length(points) == 11.0

    def test_single_point(self) -> None:
        """A single point has zero length."""
        assert polyline_length([Point(5, 5)]) == 0.0

    def test_empty(self) -> None:
        assert polyline_length([]) == 0.0


class TestResample:
    """Tests for resample."""

    def test_straight_line(self) -> None:
        """A line of length 10 at d=2.5 yields five evenly spaced points."""
        points = resample([Point(0, 0), Point(10, 0)], 2.5)
        assert points == [
            Point(0, 0),
            Point(2.5, 0),
            Point(5.0, 0),
            Point(7.5, 0),
            Point(10.0, 0),
        ]

    def test_corner(self) -> None:
        """Spacing is measured along the path across vertices."""
        points = resample([Point(0, 0), Point(4, 0), Point(4, 3)], 2.0)
        assert points == [Point(0, 0), Point(2, 0), Point(4, 0), Point(4, 2)]

    def test_residual_carries_over(self) -> None:
        """Leftover length from one segment is consumed by the next."""
        points = resample([Point(0, 0), Point(3, 0), Point(3, 3)], 2.0)
        assert points == [Point(0, 0), Point(2, 0), Point(3, 1), Point(3, 3)]

    def test_trailing_partial_step_dropped(self) -> None:
        """The final vertex is not forced into the output."""
        points = resample([Point(0, 0), Point(5, 0)], 2.0)
        assert points == [Point(0, 0), Point(2, 0), Point(4, 0)]

    def test_distance_longer_than_path(self) -> None:
        """Only the start point survives when the step exceeds the length."""
        assert resample([Point(0, 0), Point(1, 0)], 5.0) == [Point(0, 0)]

    def test_zero_distance_is_identity(self) -> None:
        """A zero target leaves the polyline untouched."""
        polyline = [Point(0, 0), Point(0.3, 0), Point(7, 2)]
        result = resample(polyline, 0.0)
        assert result == polyline
        assert result is not polyline

    def test_empty_input(self) -> None:
        assert resample([], 1.0) == []

    def test_single_point(self) -> None:
        """A lone point is returned as is."""
        assert resample([Point(1, 1)], 1.0) == [Point(1, 1)]

    def test_zero_length_segments_skipped(self) -> None:
        """Repeated vertices do not disturb the spacing."""
        points = resample([Point(0, 0), Point(0, 0), Point(4, 0), Point(4, 0)], 2.0)
        assert points == [Point(0, 0), Point(2, 0), Point(4, 0)]

    @pytest.mark.parametrize("distance", [-1.0, math.nan, math.inf, -math.inf])
    def test_invalid_distance(self, distance: float) -> None:
        """Negative, NaN and infinite distances are rejected."""
        with pytest.raises(InvalidConfigurationError, match="target distance"):
            resample([Point(0, 0), Point(1, 0)], distance)

    def test_point_count_matches_length(self) -> None:
        """A polyline of length L yields floor(L / d) + 1 points."""
        arc = Cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
        polyline = flatten(arc, 0.001)
        length = polyline_length(polyline)
        points = resample(polyline, 3.5)
        assert len(points) == math.floor(length / 3.5) + 1

    def test_uniform_spacing_on_curve(self) -> None:
        """Chord distances stay close to the step on a gentle curve."""
        arc = Cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
        points = resample(flatten(arc, 0.001), 3.5)
        assert points[0] == Point(0, 0)
        # Chords are at most the arc length between samples
        assert all(3.5 - 0.15 <= gap <= 3.5 + 1e-9 for gap in spacing(points))

    def test_output_lies_on_input(self) -> None:
        """Emitted points are interpolated on the input polyline."""
        points = resample([Point(0, 0), Point(10, 10)], 1.0)
        assert all(math.isclose(p.x, p.y) for p in points)
        assert len(points) == math.floor(math.hypot(10, 10)) + 1

    def test_monotonic_coverage(self) -> None:
        """Output positions along the input never go backwards or past its end."""
        s_curve = Cubic(Point(0, 0), Point(20, 15), Point(-10, 15), Point(10, 0))
        polyline = flatten(s_curve, 0.01)
        length = polyline_length(polyline)
        points = resample(polyline, 0.7)

        positions = arc_positions(polyline, points)

        assert positions[0] == 0.0
        assert all(a <= b + 1e-9 for a, b in zip(positions, positions[1:]))
        assert all(pos <= length + 1e-9 for pos in positions)

"""Arc-length resampling of polylines."""

import math
from collections.abc import Sequence

from svg2pts.domain import Point
from svg2pts.exceptions import InvalidConfigurationError

# Relative slack when comparing accumulated lengths, so a polyline whose
# length is an exact multiple of the step keeps its final point.
_LENGTH_EPSILON = 1e-9


def polyline_length(points: Sequence[Point]) -> float:
    """Total Euclidean length of a polyline."""
    return math.fsum(a.distance_to(b) for a, b in zip(points, points[1:]))


def resample(points: Sequence[Point], target_distance: float) -> list[Point]:
    """Re-emit a polyline at uniform arc-length spacing.

    The first point is always emitted. Walking the polyline, a new point is
    interpolated each time the length travelled since the previous emitted
    point reaches ``target_distance``; leftover length carries over into the
    next input segment. A trailing partial step is dropped, so a polyline of
    length L yields floor(L / target_distance) + 1 points.

    A target distance of zero disables resampling and returns the input
    points unchanged.

    Args:
        points: Polyline vertices in order
        target_distance: Arc length between consecutive output points

    Returns:
        Resampled points

    Raises:
        InvalidConfigurationError: If target_distance is negative, infinite or NaN
    """
    if not (target_distance >= 0 and math.isfinite(target_distance)):
        raise InvalidConfigurationError(
            f"target distance must be a finite value >= 0, got {target_distance}"
        )

    if target_distance == 0:
        return list(points)

    if not points:
        return []

    slack = target_distance * _LENGTH_EPSILON
    result = [points[0]]
    # Length still needed to reach the next output point
    remaining = target_distance

    for start, end in zip(points, points[1:]):
        seg_length = start.distance_to(end)
        if seg_length == 0:
            continue

        travelled = 0.0
        while remaining <= seg_length - travelled + slack:
            travelled += remaining
            result.append(start.lerp(end, min(travelled / seg_length, 1.0)))
            remaining = target_distance

        remaining -= seg_length - travelled

    return result

"""Curve flattening.

Converts path segments into polylines that stay within an accuracy tolerance
of the true curve, using adaptive subdivision.

All functions are pure, stateless, and safe to call from worker processes.
"""

from svg2pts.core._bezier import flatness, split_cubic, split_quadratic
from svg2pts.domain import Cubic, Line, Path, Point, Segment
from svg2pts.exceptions import InvalidConfigurationError

# Each bisection roughly quarters the deviation, so 16 levels take a curve
# spanning 1e6 units down to about 2.3e-4.
MAX_SUBDIVISION_DEPTH = 16


def check_accuracy(accuracy: float) -> None:
    """Reject negative or NaN accuracy values.

    Raises:
        InvalidConfigurationError: If accuracy is not >= 0
    """
    if not accuracy >= 0:
        raise InvalidConfigurationError(f"accuracy must be >= 0, got {accuracy}")


def flatten(segment: Segment, accuracy: float) -> list[Point]:
    """Flatten a single segment into an ordered list of points.

    Lines yield exactly their two endpoints. Curves are bisected at t=0.5
    until every leaf's control points lie within ``accuracy`` of its chord,
    or until MAX_SUBDIVISION_DEPTH is reached. Leaves are resolved first half
    before second half, so points come out in increasing curve parameter.

    Consecutive duplicate points are never emitted; a curve whose control
    points all coincide flattens to a single point.

    Args:
        segment: Line, Quadratic or Cubic segment
        accuracy: Maximum deviation between curve and polyline

    Returns:
        List of points starting at segment.start and ending at segment.end

    Raises:
        InvalidConfigurationError: If accuracy is negative

    Examples:
        >>> flatten(Line(Point(0.0, 0.0), Point(1.0, 1.0)), 0.1)
        [Point(x=0.0, y=0.0), Point(x=1.0, y=1.0)]
    """
    check_accuracy(accuracy)

    if isinstance(segment, Line):
        return [segment.start, segment.end]

    split = split_cubic if isinstance(segment, Cubic) else split_quadratic

    result = [segment.start]
    stack = [(segment.points, 0)]

    while stack:
        points, depth = stack.pop()

        # NaN flatness compares false and is accepted as a leaf.
        if depth >= MAX_SUBDIVISION_DEPTH or not flatness(points) > accuracy:
            end = points[-1]
            if end != result[-1]:
                result.append(end)
            continue

        left, right = split(points)
        stack.append((right, depth + 1))
        stack.append((left, depth + 1))

    return result


def flatten_path(path: Path, accuracy: float) -> list[Point]:
    """Flatten every segment of a path into one polyline.

    Each segment's first point equals the previous segment's last point and
    is emitted once. Zero-length segments add nothing.

    Args:
        path: Continuous path in output coordinates
        accuracy: Maximum deviation between curve and polyline

    Returns:
        Polyline starting at path.start
    """
    check_accuracy(accuracy)

    result = [path.start]
    if path.is_empty():
        return result

    for segment in path.segments:
        for point in flatten(segment, accuracy)[1:]:
            if point != result[-1]:
                result.append(point)

    return result

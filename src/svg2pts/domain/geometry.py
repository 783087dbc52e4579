"""Core geometric types for path representation.

This module defines the fundamental geometric types used throughout svg2pts:
- Point: A 2D point in output coordinate space
- Line, Quadratic, Cubic: The segment variants a path is built from
- Path: A continuous chain of segments starting at a single point
"""

import math
from dataclasses import dataclass, field
from typing import Any, Union

from svg2pts.exceptions import PathContinuityError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Uses slots since flattened paths hold many of them.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Args:
            other: Point reached at t=1
            t: Interpolation parameter

        Returns:
            The point at parameter t on the segment self -> other
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment."""

    start: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "line", "points": [p.to_dict() for p in self.points]}


@dataclass(frozen=True, slots=True)
class Quadratic:
    """A quadratic Bezier segment with a single control point."""

    start: Point
    control: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start, self.control, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "quadratic", "points": [p.to_dict() for p in self.points]}


@dataclass(frozen=True, slots=True)
class Cubic:
    """A cubic Bezier segment with two control points."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start, self.control1, self.control2, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "cubic", "points": [p.to_dict() for p in self.points]}


Segment = Union[Line, Quadratic, Cubic]

_SEGMENT_KINDS: dict[str, type] = {
    "line": Line,
    "quadratic": Quadratic,
    "cubic": Cubic,
}


def segment_from_dict(data: dict[str, Any]) -> Segment:
    """Deserialize a segment produced by ``to_dict``.

    Args:
        data: Dictionary with ``kind`` and ``points`` fields

    Returns:
        Line, Quadratic or Cubic instance

    Raises:
        ValueError: If the kind is unknown
    """
    kind = data["kind"]
    segment_cls = _SEGMENT_KINDS.get(kind)
    if segment_cls is None:
        raise ValueError(f"Unknown segment kind: {kind!r}")
    return segment_cls(*(Point.from_dict(p) for p in data["points"]))


@dataclass
class Path:
    """A continuous subpath in output coordinate space.

    Each segment starts where the previous one ended and the first segment
    starts at ``start``. The chain is validated on construction, so every
    Path reaching the flattener is continuous.

    Attributes:
        start: Initial point (the moveto)
        segments: Ordered segments; may be empty for a lone moveto
        closed: Whether the subpath was closed in the source document
        source: Label of the originating element, for log messages
    """

    start: Point
    segments: list[Segment] = field(default_factory=list)
    closed: bool = False
    source: str | None = None

    def __post_init__(self) -> None:
        current = self.start
        for index, segment in enumerate(self.segments):
            if segment.start != current:
                raise PathContinuityError(
                    f"segment {index} starts at {segment.start.to_tuple()} "
                    f"but the path is at {current.to_tuple()}",
                    source=self.source,
                )
            current = segment.end

    @property
    def end(self) -> Point:
        """Last point of the path."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    def is_empty(self) -> bool:
        """Check whether the path has no segments."""
        return not self.segments

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "start": self.start.to_dict(),
            "segments": [s.to_dict() for s in self.segments],
            "closed": self.closed,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Raises:
            PathContinuityError: If the serialized segments do not chain
        """
        return cls(
            start=Point.from_dict(data["start"]),
            segments=[segment_from_dict(s) for s in data["segments"]],
            closed=data.get("closed", False),
            source=data.get("source"),
        )

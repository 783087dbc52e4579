"""Point writer for emitting point streams.

This module provides the PointWriter class which serializes points as
``X Y\\n`` lines to a binary sink.
"""

from collections.abc import Iterable
from typing import BinaryIO

from svg2pts.domain import Point
from svg2pts.exceptions import OutputWriteError


def format_point(x: float, y: float) -> bytes:
    """Format one point as an output line.

    Uses the shortest decimal representation that round-trips to the same
    float.

    Args:
        x: X coordinate
        y: Y coordinate

    Returns:
        ASCII line ``b"X Y\\n"``
    """
    # Adding 0.0 turns -0.0 into 0.0
    return f"{x + 0.0!r} {y + 0.0!r}\n".encode("ascii")


class PointWriter:
    """Writes points to a binary sink, one per line.

    When a flip height is given, y is mirrored about it (``height - y``) so
    the SVG's y-down coordinates come out y-up.

    Example:
        with open("out.pts", "wb") as sink:
            writer = PointWriter(sink, flip_height=100.0)
            writer.write_points([Point(0.0, 0.0), Point(1.0, 2.0)])
    """

    def __init__(
        self,
        sink: BinaryIO,
        flip_height: float | None = None,
        target: str = "<stdout>",
    ) -> None:
        """Initialize the point writer.

        Args:
            sink: Binary file-like object to write to
            flip_height: Mirror y about this value, or None to keep y as is
            target: Name used in error messages
        """
        self._sink = sink
        self._flip_height = flip_height
        self._target = target
        self._count = 0

    @property
    def count(self) -> int:
        """Number of points written so far."""
        return self._count

    def write_points(self, points: Iterable[Point]) -> int:
        """Write a sequence of points.

        Args:
            points: Points in output order

        Returns:
            Number of points written by this call

        Raises:
            OutputWriteError: If the sink fails
        """
        if self._flip_height is None:
            lines = [format_point(p.x, p.y) for p in points]
        else:
            height = self._flip_height
            lines = [format_point(p.x, height - p.y) for p in points]

        try:
            self._sink.write(b"".join(lines))
        except OSError as e:
            raise OutputWriteError(self._target, e.strerror or str(e)) from e

        self._count += len(lines)
        return len(lines)

    def flush(self) -> None:
        """Flush the underlying sink.

        Raises:
            OutputWriteError: If the sink fails
        """
        try:
            self._sink.flush()
        except OSError as e:
            raise OutputWriteError(self._target, e.strerror or str(e)) from e

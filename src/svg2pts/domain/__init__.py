"""Domain models for svg2pts.

This module contains the geometric models the pipeline passes around. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel sampling)
- Independent of fontTools and XML implementation details

Key classes:
- Point: A 2D point in output coordinate space
- Line, Quadratic, Cubic: Path segment variants
- Path: A continuous chain of segments
"""

from svg2pts.domain.geometry import (
    Cubic,
    Line,
    Path,
    Point,
    Quadratic,
    Segment,
    segment_from_dict,
)

__all__: list[str] = [
    # Core types
    "Point",
    "Path",
    # Segments
    "Line",
    "Quadratic",
    "Cubic",
    "Segment",
    "segment_from_dict",
]

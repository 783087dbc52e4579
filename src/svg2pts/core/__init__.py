"""Core processing algorithms for svg2pts.

This module contains the curve-to-point resampling core:

- Curve flattening (adaptive subdivision of quadratic/cubic Beziers)
- Arc-length resampling (uniform spacing along a polyline)
- Pipeline orchestration (sampling plan, ordered parallel sampling)

The flattening and resampling functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- flatten: Convert one segment to points within an accuracy tolerance
- flatten_path: Convert a whole path to a polyline
- resample: Re-emit a polyline at a uniform target distance
- polyline_length: Total length of a polyline
- sample_path: flatten_path followed by resample

Key classes:
- PathProcessor: Runs the full document-to-points conversion
- SamplingPlan: Effective distance and accuracy for a run
"""

from svg2pts.core.flatten import MAX_SUBDIVISION_DEPTH, flatten, flatten_path
from svg2pts.core.processor import (
    PathProcessor,
    SamplingPlan,
    process_path,
    sample_path,
)
from svg2pts.core.resample import polyline_length, resample

__all__ = [
    "MAX_SUBDIVISION_DEPTH",
    # Processor classes
    "PathProcessor",
    "SamplingPlan",
    # Core functions
    "flatten",
    "flatten_path",
    "polyline_length",
    "process_path",
    "resample",
    "sample_path",
]

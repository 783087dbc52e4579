"""svg2pts - Convert SVG paths to a list of points.

svg2pts is a CLI tool that converts every visible path of an SVG document
into a flat sequence of points, optionally resampled to a uniform spacing,
for plotters, oscilloscopes and other point-stream consumers.

Example:
    $ svg2pts -d 0.5 drawing.svg drawing.pts

This writes one `X Y` line per point, with curves flattened and points
spaced 0.5 user units apart along each path.
"""

__version__ = "0.1.5"

__all__ = ["__version__"]

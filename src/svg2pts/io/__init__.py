"""Document I/O layer for svg2pts.

This module handles reading SVG documents and writing point streams. It
provides a clean abstraction layer between fontTools/XML and the domain
models.

Key responsibilities:
- Parse SVG documents and resolve transforms and visibility
- Convert shapes and path data to domain Paths
- Serialize points as ``X Y`` lines

Key classes:
- SvgReader: Load documents and extract visible paths
- PointWriter: Write points to a binary sink
"""

from svg2pts.io.reader import SvgReader
from svg2pts.io.writer import PointWriter

__all__ = [
    "PointWriter",
    "SvgReader",
]

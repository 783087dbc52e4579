"""SVG reader for loading documents.

This module provides the SvgReader class for parsing SVG documents and
extracting their visible geometry as domain Paths in document user space.
"""

from collections.abc import Callable, Iterator

from fontTools.misc import etree
from fontTools.pens.transformPen import TransformPen
from fontTools.svgLib.path import parse_path
from fontTools.svgLib.path.shapes import PathBuilder

from svg2pts.domain import Path
from svg2pts.exceptions import (
    DocumentFormatError,
    DocumentParseError,
)
from svg2pts.io.converter import (
    RenderState,
    SegmentPen,
    parse_length,
    parse_numbers,
    parse_style,
    strip_namespace,
)

# Elements whose content is never rendered directly
NON_RENDERED = frozenset(
    {
        "defs",
        "clippath",
        "mask",
        "marker",
        "pattern",
        "symbol",
        "metadata",
        "title",
        "desc",
        "style",
        "script",
        "lineargradient",
        "radialgradient",
        "filter",
    }
)

SHAPES = frozenset({"path", "rect", "circle", "ellipse", "line", "polyline", "polygon"})

DEFAULT_SIZE = 100.0

SkipCallback = Callable[[str, str], None]


class SvgReader:
    """Loads SVG documents and extracts visible paths.

    Elements are visited in document order. Group transforms and the fill,
    stroke and visibility properties are inherited down the tree; hidden
    elements and elements with neither fill nor stroke produce no paths.

    Example:
        reader = SvgReader(Path("drawing.svg").read_bytes(), source="drawing.svg")
        reader.load()
        for path in reader.iter_paths():
            print(path.source, len(path.segments))
    """

    def __init__(self, data: bytes, source: str = "<stdin>") -> None:
        """Initialize the reader.

        Args:
            data: Raw SVG document bytes
            source: Name used in error messages
        """
        self._data = data
        self._source = source
        self._root = None
        self._view_box: tuple[float, float, float, float] | None = None

    def load(self) -> None:
        """Parse the document.

        Raises:
            DocumentParseError: If the data is not well-formed XML
            DocumentFormatError: If the root element is not <svg>
        """
        try:
            root = etree.fromstring(self._data)
        except Exception as e:
            raise DocumentParseError(str(e)) from e

        tag = strip_namespace(root.tag) if isinstance(root.tag, str) else ""
        if tag != "svg":
            raise DocumentFormatError(f"root element is <{tag}>, expected <svg>")

        self._root = root
        self._view_box = self._read_view_box(root)

    @staticmethod
    def _read_view_box(root) -> tuple[float, float, float, float]:
        view_box = root.attrib.get("viewBox")
        if view_box is not None:
            numbers = parse_numbers(view_box)
            if len(numbers) != 4:
                raise DocumentParseError(f"viewBox needs 4 numbers, got {view_box!r}", "svg")
            return (numbers[0], numbers[1], numbers[2], numbers[3])

        width = parse_length(root.attrib.get("width"))
        height = parse_length(root.attrib.get("height"))
        return (
            0.0,
            0.0,
            width if width is not None else DEFAULT_SIZE,
            height if height is not None else DEFAULT_SIZE,
        )

    def _require_loaded(self):
        if self._root is None or self._view_box is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._root, self._view_box

    @property
    def source(self) -> str:
        return self._source

    @property
    def width(self) -> float:
        """Width of the document frame (viewBox or width attribute)."""
        _, view_box = self._require_loaded()
        return view_box[2]

    @property
    def height(self) -> float:
        """Height of the document frame (viewBox or height attribute)."""
        _, view_box = self._require_loaded()
        return view_box[3]

    @property
    def flip_height(self) -> float:
        """Y value that maps the bottom of the frame to 0 when flipping.

        Returns:
            min-y + height of the document frame
        """
        _, view_box = self._require_loaded()
        return view_box[1] + view_box[3]

    def iter_paths(self, on_skip: SkipCallback | None = None) -> Iterator[Path]:
        """Iterate over visible paths in document order.

        Args:
            on_skip: Optional callback(element_label, reason) for elements
                that produce no output

        Yields:
            Paths in document user space, one per subpath

        Raises:
            RuntimeError: If the document has not been loaded yet
            DocumentParseError: If a shape has malformed attributes
        """
        root, _ = self._require_loaded()
        yield from self._walk(root, RenderState(), on_skip)

    def read_paths(self, on_skip: SkipCallback | None = None) -> list[Path]:
        """Collect all visible paths into a list."""
        return list(self.iter_paths(on_skip))

    def _walk(self, el, state: RenderState, on_skip: SkipCallback | None) -> Iterator[Path]:
        # Comments and processing instructions have non-string tags in lxml
        if not isinstance(el.tag, str):
            return

        tag = strip_namespace(el.tag)
        if tag.lower() in NON_RENDERED:
            return

        label = _element_label(el, tag)
        properties = parse_style(el.attrib)

        if properties.get("display") == "none":
            _notify(on_skip, label, "display:none")
            return

        try:
            state = state.derive(el.attrib, properties)
        except ValueError as e:
            raise DocumentParseError(str(e), label) from e

        if tag in SHAPES:
            if not state.is_visible:
                _notify(on_skip, label, f"visibility:{state.visibility}")
            elif not state.is_painted:
                _notify(on_skip, label, "no fill or stroke")
            else:
                yield from self._shape_paths(el, tag, label, state)
            return

        for child in el:
            yield from self._walk(child, state, on_skip)

    def _shape_paths(self, el, tag: str, label: str, state: RenderState) -> list[Path]:
        # PathBuilder only understands matrix() transforms, and ours is
        # already folded into state.transform
        geometry = etree.Element(
            tag, {k: v for k, v in el.attrib.items() if k != "transform"}
        )
        builder = PathBuilder()
        pen = SegmentPen(source=label)

        try:
            builder.add_path_from_element(geometry)
            for path_data in builder.paths:
                parse_path(path_data, TransformPen(pen, state.transform))
            # parse_path ends every subpath, flush anything a malformed
            # path data string left open
            pen.endPath()
        except (ValueError, TypeError, IndexError) as e:
            raise DocumentParseError(str(e) or type(e).__name__, label) from e

        return pen.paths


def _element_label(el, tag: str) -> str:
    element_id = el.attrib.get("id")
    return f"{tag}#{element_id}" if element_id else tag


def _notify(on_skip: SkipCallback | None, label: str, reason: str) -> None:
    if on_skip is not None:
        on_skip(label, reason)

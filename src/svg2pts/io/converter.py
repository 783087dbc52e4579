"""Converters between SVG markup and domain models.

This module handles the conversion from SVG elements and attributes to our
domain models (Path, segments, Point): presentation-attribute resolution,
transform parsing, and a fontTools pen that records drawing commands as
segments.
"""

import math
import re
from dataclasses import dataclass, replace

from fontTools.misc.transform import Identity, Transform
from fontTools.pens.basePen import BasePen

from svg2pts.domain import Cubic, Line, Path, Point, Quadratic, Segment

# Presentation properties that affect which elements produce output
STYLE_PROPERTIES = ("fill", "stroke", "display", "visibility")

_TRANSFORM_RE = re.compile(r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)\s*,?")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-z%]*)\s*$")

# CSS absolute units in user units (px)
UNIT_SCALE = {
    "": 1.0,
    "px": 1.0,
    "pt": 4.0 / 3.0,
    "pc": 16.0,
    "mm": 96.0 / 25.4,
    "cm": 96.0 / 2.54,
    "in": 96.0,
}


def strip_namespace(tag: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on tags."""
    return tag.split("}", 1)[1] if "}" in tag else tag


def parse_numbers(value: str) -> list[float]:
    """Extract every number from a comma/whitespace separated list."""
    return [float(n) for n in _NUMBER_RE.findall(value)]


def parse_length(value: str | None) -> float | None:
    """Parse an SVG length into user units.

    Args:
        value: Attribute value such as "210mm" or "100"

    Returns:
        Length in px, or None for missing, relative (%/em) or malformed values
    """
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if not match:
        return None
    number, unit = match.groups()
    scale = UNIT_SCALE.get(unit)
    if scale is None:
        return None
    return float(number) * scale


def parse_transform(value: str) -> Transform:
    """Parse an SVG transform list into a single Transform.

    Transforms are applied right to left, as in SVG: the result of
    "translate(10) scale(2)" scales first, then translates.

    Args:
        value: Transform attribute value

    Returns:
        Combined transform

    Raises:
        ValueError: If the list is malformed or has wrong argument counts
    """
    transform = Identity
    pos = 0
    value = value.strip()

    while pos < len(value):
        match = _TRANSFORM_RE.match(value, pos)
        if not match:
            raise ValueError(f"malformed transform {value!r}")
        pos = match.end()
        name = match.group(1)
        args = parse_numbers(match.group(2))

        if name == "matrix" and len(args) == 6:
            transform = transform.transform(args)
        elif name == "translate" and len(args) in (1, 2):
            transform = transform.translate(args[0], args[1] if len(args) == 2 else 0)
        elif name == "scale" and len(args) in (1, 2):
            transform = transform.scale(args[0], args[1] if len(args) == 2 else args[0])
        elif name == "rotate" and len(args) == 1:
            transform = transform.rotate(math.radians(args[0]))
        elif name == "rotate" and len(args) == 3:
            angle, cx, cy = args
            transform = transform.translate(cx, cy).rotate(math.radians(angle)).translate(-cx, -cy)
        elif name == "skewX" and len(args) == 1:
            transform = transform.skew(math.radians(args[0]), 0)
        elif name == "skewY" and len(args) == 1:
            transform = transform.skew(0, math.radians(args[0]))
        else:
            raise ValueError(f"wrong number of arguments for {name}: {match.group(0).strip()!r}")

    return transform


def parse_style(attrib: dict[str, str]) -> dict[str, str]:
    """Collect presentation properties from attributes and inline style.

    Declarations in the ``style`` attribute override presentation attributes.

    Args:
        attrib: Element attributes

    Returns:
        Mapping of property name to lower-cased value for STYLE_PROPERTIES
    """
    properties = {
        name: attrib[name].strip().lower() for name in STYLE_PROPERTIES if name in attrib
    }

    for declaration in attrib.get("style", "").split(";"):
        name, sep, value = declaration.partition(":")
        name = name.strip()
        if sep and name in STYLE_PROPERTIES:
            properties[name] = value.replace("!important", "").strip().lower()

    return properties


@dataclass(frozen=True)
class RenderState:
    """Inherited rendering state while walking the element tree.

    Attributes:
        transform: Current transformation matrix into document user space
        fill: Inherited fill paint
        stroke: Inherited stroke paint
        visibility: Inherited visibility
    """

    transform: Transform = Identity
    fill: str = "black"
    stroke: str = "none"
    visibility: str = "visible"

    def derive(self, attrib: dict[str, str], properties: dict[str, str]) -> "RenderState":
        """Compute the state of a child element.

        Args:
            attrib: Element attributes (for ``transform``)
            properties: Output of parse_style for the element

        Returns:
            New state with the element's transform composed onto ours and
            its explicit properties applied

        Raises:
            ValueError: If the transform attribute is malformed
        """
        changes: dict[str, object] = {}

        if "transform" in attrib:
            changes["transform"] = self.transform.transform(parse_transform(attrib["transform"]))

        for name in ("fill", "stroke", "visibility"):
            value = properties.get(name)
            if value and value != "inherit":
                changes[name] = value

        return replace(self, **changes) if changes else self

    @property
    def is_painted(self) -> bool:
        """Whether the element has a fill or a stroke."""
        return self.fill != "none" or self.stroke != "none"

    @property
    def is_visible(self) -> bool:
        return self.visibility not in ("hidden", "collapse")


class SegmentPen(BasePen):
    """fontTools pen that records drawing commands as domain Paths.

    Each moveTo starts a new Path; closePath adds a closing line back to the
    subpath start when the current point is elsewhere.

    Example:
        pen = SegmentPen(source="path#logo")
        parse_path("M0 0 L10 0 Z", pen)
        pen.paths  # [Path(start=Point(0, 0), segments=[...], closed=True)]
    """

    def __init__(self, source: str | None = None) -> None:
        super().__init__(glyphSet=None)
        self.paths: list[Path] = []
        self._source = source
        self._start: Point | None = None
        self._segments: list[Segment] = []

    def _current(self) -> Point:
        if self._segments:
            return self._segments[-1].end
        if self._start is None:
            raise ValueError("drawing command before moveTo")
        return self._start

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._flush(closed=False)
        self._start = _to_point(pt)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._segments.append(Line(self._current(), _to_point(pt)))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self._segments.append(
            Cubic(self._current(), _to_point(pt1), _to_point(pt2), _to_point(pt3))
        )

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self._segments.append(Quadratic(self._current(), _to_point(pt1), _to_point(pt2)))

    def _closePath(self) -> None:
        if self._start is not None and self._current() != self._start:
            self._segments.append(Line(self._current(), self._start))
        self._flush(closed=True)

    def _endPath(self) -> None:
        self._flush(closed=False)

    def _flush(self, closed: bool) -> None:
        if self._start is None:
            return
        self.paths.append(
            Path(
                start=self._start,
                segments=self._segments,
                closed=closed,
                source=self._source,
            )
        )
        self._start = None
        self._segments = []


def _to_point(pt: tuple[float, float]) -> Point:
    return Point(float(pt[0]), float(pt[1]))

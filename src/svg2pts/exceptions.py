"""Exception hierarchy for svg2pts."""


class Svg2PtsError(Exception):
    """Base exception for all svg2pts errors."""

    pass


class InvalidConfigurationError(Svg2PtsError):
    """A sampling or output setting is out of range or inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DocumentError(Svg2PtsError):
    """Errors related to reading the input document."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading the input document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class DocumentParseError(DocumentError):
    """Malformed XML or element attributes."""

    def __init__(self, reason: str, element: str | None = None) -> None:
        self.reason = reason
        self.element = element
        if element:
            super().__init__(f"Invalid <{element}> element: {reason}")
        else:
            super().__init__(f"Unable to parse SVG: {reason}")


class DocumentFormatError(DocumentError):
    """The document is well-formed XML but not an SVG document."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Not an SVG document: {details}")


class GeometryError(Svg2PtsError):
    """Errors in path geometry."""

    pass


class PathContinuityError(GeometryError):
    """A segment does not start where the previous one ended."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(f"Discontinuous path: {message}")


class OutputWriteError(Svg2PtsError):
    """Error writing points to the output sink."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to write '{target}': {reason}")

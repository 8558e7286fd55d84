"""Exception hierarchy for penpoly."""

from typing import Any


class PenpolyError(Exception):
    """Base exception for all penpoly errors."""

    pass


class PathError(PenpolyError):
    """Errors related to path command streams."""

    pass


class MalformedPathError(PathError):
    """A command stream broke the Begin/Line/End contract.

    Raised when a Line or End arrives with no open sub-path, or when a
    command kind other than Begin, Line or End reaches the contour grouper.
    This signals a programming error upstream (usually in the flattener)
    and is never recovered from.
    """

    def __init__(self, reason: str, event: Any = None) -> None:
        self.reason = reason
        self.event = event
        message = f"Malformed path command stream: {reason}"
        if event is not None:
            message = f"{message} (got {event!r})"
        super().__init__(message)


class GeometryError(PenpolyError):
    """Errors in geometric calculations."""

    pass


class ToleranceError(GeometryError):
    """Flattening tolerance is not a positive finite number."""

    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        super().__init__(f"Flattening tolerance must be positive and finite, got {tolerance!r}")


class BooleanOperationError(GeometryError):
    """The boolean engine rejected its input or failed to execute."""

    def __init__(self, op: str, reason: str) -> None:
        self.op = op
        self.reason = reason
        super().__init__(f"Boolean {op} failed: {reason}")


class FontError(PenpolyError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(PenpolyError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")

"""
Exception types raised by css3images itself.

Failures coming from the raster backend (bad colors, bad sizes, unknown file
extensions, unwritable paths) are not wrapped; they reach the caller as the
backend raised them.
"""


class Css3ImagesError(ValueError):
    """Base class for errors raised by this package."""


class ConstructionError(Css3ImagesError):
    """A required configuration field is missing."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Missing required field: {field!r}")


class EmptyGradientError(ConstructionError):
    """Rendering was requested for a gradient with no segments."""

    def __init__(self, stop_count: int):
        self.stop_count = stop_count
        super().__init__(
            "color_stops",
            f"At least 2 color stops are required to render a gradient, got {stop_count}",
        )


class CSSParseError(Css3ImagesError):
    """A linear-gradient() string could not be parsed."""

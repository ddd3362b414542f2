"""
Linear Gradient Module
======================

Renders CSS3 ``linear-gradient`` values into raster images.

A LinearGradient is built from a width and a list of color stops. The stops
are normalized into adjacent ColorStop segments once, at construction. Each
segment becomes a ``width x height`` rectangle blending between its two
colors, and the rectangles are stacked top to bottom into the final image.

Example
-------
>>> grey_to_white = LinearGradient(
...     width=1,
...     color_stops=[("rgb(242,242,242)", 0), ("rgb(255,255,255)", 17)],
... )
>>> grey_to_white.write("example.png").size
(1, 17)

Currently limited to top to bottom gradients.
"""
from __future__ import annotations
import warnings
from os import PathLike
from typing import Any, List, Mapping, Optional, Sequence, Union

from boundednumbers import BoundType

from ..backends.base import RasterBackend
from ..backends.pillow_backend import PillowBackend
from ..config import _UNSET, LinearGradientConfig
from ..errors import EmptyGradientError
from ..normalizers.color_stop_normalizer import ColorStop, coerce_stop_sequence
from ..parsers.css_linear_gradient import parse_linear_gradient
from ..types.stop_types import Direction, ImageMode, StopInput, UnitTransform


class LinearGradient:
    """
    Image factory for a top to bottom CSS3 linear gradient.

    The rendered image is computed on first use and cached for the life of
    the instance. Errors from the backend (unknown colors, bad sizes, bad file
    extensions) are not caught.
    """

    def __init__(
        self,
        width: int = _UNSET,
        color_stops: Optional[Sequence[StopInput]] = _UNSET,
        direction: Union[Direction, str] = Direction.HORIZONTAL,
        mode: Union[ImageMode, str] = ImageMode.RGB,
        unit_transform: Optional[UnitTransform] = None,
        bound_type: BoundType = BoundType.CLAMP,
        backend: Optional[RasterBackend] = None,
    ):
        """
        Args:
            width: Width of the image in pixels
            color_stops: Ordered (color, offset) pairs; None counts as empty.
                Any iterable is accepted and copied once.
            direction: Axis each segment blends along
            mode: Pixel mode of the default Pillow backend
            unit_transform: Optional easing for each segment's blend
            bound_type: How eased coefficients are kept inside [0, 1]
            backend: Raster backend; a PillowBackend in ``mode`` by default

        Raises:
            ConstructionError: If ``width`` or ``color_stops`` is missing.
        """
        self.config = LinearGradientConfig(
            width=width,
            color_stops=color_stops,
            direction=direction,
            mode=mode,
            unit_transform=unit_transform,
            bound_type=bound_type,
        )
        self.backend = backend if backend is not None else PillowBackend(self.config.mode)
        raw_stops = coerce_stop_sequence(self.config.color_stops)
        self._stop_count = len(raw_stops)
        self._color_stops = tuple(ColorStop.from_stops(raw_stops))
        self._image = None
        if self._stop_count < 2:
            warnings.warn(
                f"LinearGradient built with {self._stop_count} color stop(s); "
                "it has no segments and cannot be rendered",
                UserWarning,
                stacklevel=2,
            )

    @classmethod
    def from_config(
        cls,
        config: LinearGradientConfig,
        backend: Optional[RasterBackend] = None,
    ) -> LinearGradient:
        return cls(
            width=config.width,
            color_stops=config.color_stops,
            direction=config.direction,
            mode=config.mode,
            unit_transform=config.unit_transform,
            bound_type=config.bound_type,
            backend=backend,
        )

    @classmethod
    def from_mapping(
        cls,
        attributes: Mapping[Any, Any],
        backend: Optional[RasterBackend] = None,
    ) -> LinearGradient:
        """
        Build from a settings mapping such as ``{"width": 1, "color_stops": [...]}``.

        Raises:
            ConstructionError: If ``width`` or ``color_stops`` is missing.
        """
        return cls.from_config(LinearGradientConfig.from_mapping(attributes), backend=backend)

    @classmethod
    def from_css(
        cls,
        css: str,
        width: int = 1,
        backend: Optional[RasterBackend] = None,
        **options,
    ) -> LinearGradient:
        """
        Build from a CSS value such as ``linear-gradient(top, #000 0px, #fff 17px)``.

        Raises:
            CSSParseError: If the value cannot be parsed.
        """
        return cls(width=width, color_stops=parse_linear_gradient(css), backend=backend, **options)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def color_stops(self) -> List[ColorStop]:
        return list(self._color_stops)

    @property
    def height(self):
        """Total height of the rendered image, in whole pixels per segment."""
        return sum(int(stop.height) for stop in self._color_stops)

    def render(self):
        """
        Return the gradient image, rendering it on the first call.

        Raises:
            EmptyGradientError: If there are fewer than two color stops.
        """
        if self._image is None:
            if not self._color_stops:
                raise EmptyGradientError(self._stop_count)
            strips = [
                stop.fill(
                    self.backend,
                    self.width,
                    direction=self.config.direction,
                    unit_transform=self.config.unit_transform,
                    bound_type=self.config.bound_type,
                )
                for stop in self._color_stops
            ]
            self._image = self.backend.stack_vertical(strips)
        return self._image

    @property
    def image(self):
        return self.render()

    def write(self, path: Union[str, PathLike], **options):
        """
        Render if needed, then save the image to ``path``.

        The file format follows the extension of ``path``.

        Returns:
            The rendered image
        """
        image = self.render()
        self.backend.save(image, path, **options)
        return image

    def __repr__(self) -> str:
        return f"LinearGradient(width={self.width!r}, color_stops={self.color_stops!r})"

"""
Color stop normalization.

CSS3 gradients list each distinct color once, together with the distance at
which it appears. Rendering works on adjacent pairs instead, so the flat list

    [("#000", 0), ("#fff", 17), ("#ccc", 18)]

becomes

    [ColorStop("#000", "#fff", 17), ColorStop("#fff", "#ccc", 18)]

A segment's height is the later stop's offset exactly as given, not the
difference between the two offsets.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Optional

from boundednumbers import BoundType

from ..types.stop_types import ColorSpec, Direction, Scalar, StopInput, UnitTransform

if TYPE_CHECKING:
    from ..backends.base import RasterBackend


class ColorStop(NamedTuple):
    """One gradient segment: blend from one color to the next over ``height`` pixels."""

    start: ColorSpec
    end: ColorSpec
    height: Scalar

    # "from" is a keyword, so the fields are start/end with read-only aliases.
    @property
    def from_color(self) -> ColorSpec:
        return self.start

    @property
    def to_color(self) -> ColorSpec:
        return self.end

    def fill(
        self,
        backend: RasterBackend,
        width: int,
        direction: Direction = Direction.HORIZONTAL,
        unit_transform: Optional[UnitTransform] = None,
        bound_type: BoundType = BoundType.CLAMP,
    ):
        """
        Ask the backend for this segment's filled rectangle.

        Args:
            backend: Raster backend that owns pixel filling
            width: Image width in pixels
            direction: Axis the blend runs along
            unit_transform: Optional easing applied to the blend coefficients
            bound_type: How eased coefficients are brought back into [0, 1]

        Returns:
            Backend image of size (width, height)
        """
        return backend.gradient_rect(
            width,
            self.height,
            self.start,
            self.end,
            direction=direction,
            unit_transform=unit_transform,
            bound_type=bound_type,
        )

    @classmethod
    def from_stops(cls, stops: Optional[Iterable[StopInput]]) -> List[ColorStop]:
        return normalize_color_stops(stops)


def coerce_stop_sequence(stops: Optional[Iterable[StopInput]]) -> List[StopInput]:
    """Absent input means no stops; anything else is materialized into a list."""
    if stops is None:
        return []
    return list(stops)


def normalize_color_stops(stops: Optional[Iterable[StopInput]]) -> List[ColorStop]:
    """
    Pair each stop with the one before it.

    Args:
        stops: Ordered (color, offset) pairs, or None

    Returns:
        len(stops) - 1 ColorStops (none for zero or one stop)
    """
    stop_list = coerce_stop_sequence(stops)
    color_stops = []
    for i, stop in enumerate(stop_list[1:]):
        previous = stop_list[i]
        color_stops.append(ColorStop(previous[0], stop[0], stop[-1]))
    return color_stops

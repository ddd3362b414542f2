from __future__ import annotations
from enum import Enum
from typing import Callable, Sequence, Tuple, Union
import numpy as np

Scalar = int | float
# Opaque color value. Never inspected here, the backend resolves it.
ColorSpec = str
StopInput = Union[Tuple[ColorSpec, Scalar], Sequence]
UnitTransform = Callable[[np.ndarray], np.ndarray]


class Direction(str, Enum):
    """Axis along which a single segment blends from its start to its end color."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ImageMode(str, Enum):
    RGB = "RGB"
    RGBA = "RGBA"


channel_counts = {
    ImageMode.RGB: 3,
    ImageMode.RGBA: 4,
}


def to_direction(value: Union[Direction, str]) -> Direction:
    """
    Coerce a direction name into a Direction.

    Args:
        value: Direction member or its string value (case-insensitive)

    Returns:
        Direction member
    """
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown direction: {value!r}") from None


def to_image_mode(value: Union[ImageMode, str]) -> ImageMode:
    if isinstance(value, ImageMode):
        return value
    try:
        return ImageMode(str(value).upper())
    except ValueError:
        raise ValueError(f"Unsupported image mode: {value!r}") from None

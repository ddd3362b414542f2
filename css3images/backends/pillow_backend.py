"""
Pillow implementation of the raster backend.

Colors are resolved with ``PIL.ImageColor`` so anything Pillow understands
(hex, ``rgb()``, ``hsl()``, named colors) can be used as a stop color. Pixel
buffers are built with numpy and handed to ``Image.fromarray``.
"""
from __future__ import annotations
from os import PathLike
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image, ImageColor
from boundednumbers import BoundType, bound_type_to_np_function

from .base import RasterBackend
from ..types.stop_types import (
    ColorSpec,
    Direction,
    ImageMode,
    Scalar,
    UnitTransform,
    to_direction,
    to_image_mode,
)


def blend_coefficients(
    steps: int,
    unit_transform: Optional[UnitTransform] = None,
    bound_type: BoundType = BoundType.CLAMP,
) -> np.ndarray:
    """
    Interpolation parameter for each pixel along the blend axis.

    Args:
        steps: Number of pixels along the blend axis
        unit_transform: Optional easing, applied to u in [0, 1]
        bound_type: Brings transformed values back into [0, 1]

    Returns:
        1D float array of length ``steps``
    """
    u = np.linspace(0.0, 1.0, steps, dtype=float)
    if unit_transform is not None:
        u = np.asarray(unit_transform(u), dtype=float)
    fn = bound_type_to_np_function[bound_type]
    return fn(u, 0.0, 1.0)


class PillowBackend(RasterBackend):

    def __init__(self, mode: Union[ImageMode, str] = ImageMode.RGB):
        self.mode = to_image_mode(mode)

    def resolve_color(self, color: ColorSpec) -> np.ndarray:
        # ImageColor raises ValueError for anything it cannot parse.
        return np.array(ImageColor.getcolor(color, self.mode.value), dtype=float)

    def gradient_rect(
        self,
        width: int,
        height: Scalar,
        start: ColorSpec,
        end: ColorSpec,
        direction: Direction = Direction.HORIZONTAL,
        unit_transform: Optional[UnitTransform] = None,
        bound_type: BoundType = BoundType.CLAMP,
    ) -> Image.Image:
        width, height = int(width), int(height)
        direction = to_direction(direction)
        start_value = self.resolve_color(start)
        end_value = self.resolve_color(end)

        steps = width if direction == Direction.HORIZONTAL else height
        u = blend_coefficients(max(steps, 0), unit_transform, bound_type)[:, None]
        colors = np.round(start_value * (1 - u) + end_value * u).astype(np.uint8)

        if direction == Direction.HORIZONTAL:
            pixels = np.broadcast_to(colors[None, :, :], (height, width, colors.shape[-1]))
        else:
            pixels = np.broadcast_to(colors[:, None, :], (height, width, colors.shape[-1]))
        return Image.fromarray(np.ascontiguousarray(pixels))

    def stack_vertical(self, images: Sequence[Image.Image]) -> Image.Image:
        if not images:
            raise ValueError("No images to stack")
        width = max(img.width for img in images)
        height = sum(img.height for img in images)
        combined = Image.new(self.mode.value, (width, height))
        y = 0
        for img in images:
            if img.height:
                combined.paste(img, (0, y))
            y += img.height
        return combined

    def save(self, image: Image.Image, path: Union[str, PathLike], **options) -> None:
        image.save(path, **options)

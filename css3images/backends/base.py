from __future__ import annotations
from abc import ABC, abstractmethod
from os import PathLike
from typing import Any, Optional, Sequence, Union

from boundednumbers import BoundType

from ..types.stop_types import ColorSpec, Direction, Scalar, UnitTransform


class RasterBackend(ABC):
    """
    The raster library a LinearGradient renders through.

    Only three primitives are needed: a rectangle filled with a two-color
    linear blend, vertical stacking of rectangles, and encoding to a file.
    Swapping raster libraries means implementing these three methods.
    """

    @abstractmethod
    def gradient_rect(
        self,
        width: int,
        height: Scalar,
        start: ColorSpec,
        end: ColorSpec,
        direction: Direction = Direction.HORIZONTAL,
        unit_transform: Optional[UnitTransform] = None,
        bound_type: BoundType = BoundType.CLAMP,
    ) -> Any:
        """Create a width x height image blending from ``start`` to ``end``."""
        pass

    @abstractmethod
    def stack_vertical(self, images: Sequence[Any]) -> Any:
        """Concatenate images top to bottom, first image on top."""
        pass

    @abstractmethod
    def save(self, image: Any, path: Union[str, PathLike], **options) -> None:
        """Encode ``image`` to ``path``; the format follows the file extension."""
        pass

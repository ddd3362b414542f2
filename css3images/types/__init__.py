from .stop_types import (
    Scalar,
    ColorSpec,
    StopInput,
    UnitTransform,
    Direction,
    ImageMode,
    channel_counts,
    to_direction,
    to_image_mode,
)

__all__ = [
    "Scalar",
    "ColorSpec",
    "StopInput",
    "UnitTransform",
    "Direction",
    "ImageMode",
    "channel_counts",
    "to_direction",
    "to_image_mode",
]

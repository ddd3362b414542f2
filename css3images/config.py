"""
Construction settings for a LinearGradient.

``width`` and ``color_stops`` are required; everything else has a default.
Mappings may use plain string keys or any key whose ``str()`` is the field
name, so ``{"width": 1}`` and enum-keyed settings both work.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Sequence, Union

from boundednumbers import BoundType

from .errors import ConstructionError
from .normalizers.color_stop_normalizer import coerce_stop_sequence
from .types.stop_types import (
    Direction,
    ImageMode,
    StopInput,
    UnitTransform,
    to_direction,
    to_image_mode,
)

REQUIRED_FIELDS = ("width", "color_stops")
# Default for required fields, so leaving one out raises ConstructionError.
_UNSET = object()


@dataclass(frozen=True)
class LinearGradientConfig:
    """Settings a LinearGradient is built from.

    ``width`` and ``color_stops`` must be given; leaving either out raises
    ConstructionError. ``color_stops`` is copied into a tuple, so one-shot
    iterables can be passed.
    """
    width: int = _UNSET
    color_stops: Optional[Sequence[StopInput]] = _UNSET
    direction: Union[Direction, str] = Direction.HORIZONTAL
    mode: Union[ImageMode, str] = ImageMode.RGB
    unit_transform: Optional[UnitTransform] = None
    bound_type: BoundType = BoundType.CLAMP

    def __post_init__(self):
        if self.width is None or self.width is _UNSET:
            raise ConstructionError("width")
        if self.color_stops is _UNSET:
            raise ConstructionError("color_stops")
        if self.color_stops is not None:
            object.__setattr__(self, "color_stops", tuple(coerce_stop_sequence(self.color_stops)))
        # frozen, so normalized values go through object.__setattr__
        object.__setattr__(self, "direction", to_direction(self.direction))
        object.__setattr__(self, "mode", to_image_mode(self.mode))

    @classmethod
    def from_mapping(cls, attributes: Mapping[Any, Any]) -> LinearGradientConfig:
        """
        Build a config from a mapping of settings.

        Raises:
            ConstructionError: If ``width`` or ``color_stops`` is missing.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in attributes.items():
            name = getattr(key, "value", key)
            name = str(name).lstrip(":")
            if name in known:
                values[name] = value
        for name in REQUIRED_FIELDS:
            if name not in values:
                raise ConstructionError(name)
        return cls(**values)

"""
css3images - CSS3 gradients as raster images
============================================

Turns CSS3 ``linear-gradient`` values (a width plus an ordered list of color
stops) into vertical strip images, rendered through Pillow.

Quick Start
-----------
>>> from css3images import LinearGradient
>>>
>>> gradient = LinearGradient(width=1, color_stops=[("#000", 0), ("#fff", 17)])
>>> gradient.write("gradient.png").size
(1, 17)
>>>
>>> LinearGradient.from_css("linear-gradient(top, #000 0px, #fff 17px, #ccc 18px)").height
35

Modules
-------
- normalizers: ColorStop and stop-list normalization
- gradients: LinearGradient image factory
- backends: raster backend interface and the Pillow implementation
- parsers: CSS linear-gradient() parsing
- config: LinearGradientConfig construction settings
"""

from .backends import PillowBackend, RasterBackend
from .config import LinearGradientConfig
from .errors import ConstructionError, CSSParseError, Css3ImagesError, EmptyGradientError
from .gradients import LinearGradient
from .normalizers import ColorStop, normalize_color_stops
from .parsers import parse_linear_gradient
from .types import Direction, ImageMode

__version__ = "0.2.0"

__all__ = [
    # gradients
    "LinearGradient",
    "LinearGradientConfig",
    "ColorStop",
    "normalize_color_stops",
    "parse_linear_gradient",
    # backends
    "RasterBackend",
    "PillowBackend",
    # types
    "Direction",
    "ImageMode",
    # errors
    "Css3ImagesError",
    "ConstructionError",
    "EmptyGradientError",
    "CSSParseError",
    "__version__",
]

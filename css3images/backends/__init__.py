from .base import RasterBackend
from .pillow_backend import PillowBackend, blend_coefficients

__all__ = ["RasterBackend", "PillowBackend", "blend_coefficients"]

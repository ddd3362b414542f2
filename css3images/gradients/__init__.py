from .linear_gradient import LinearGradient

__all__ = ["LinearGradient"]

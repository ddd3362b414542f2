from .color_stop_normalizer import ColorStop, coerce_stop_sequence, normalize_color_stops

__all__ = ["ColorStop", "coerce_stop_sequence", "normalize_color_stops"]

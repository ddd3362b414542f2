from .css_linear_gradient import parse_linear_gradient, parse_color_stop, split_arguments

__all__ = ["parse_linear_gradient", "parse_color_stop", "split_arguments"]

"""
Parse CSS ``linear-gradient()`` values into the stop list LinearGradient takes.

Only top-to-bottom gradients are supported. Stop lengths are pixels (``17px``)
or bare numbers; the first stop may omit its length and then sits at 0.

    >>> parse_linear_gradient("linear-gradient(top, rgb(242,242,242) 0px, #fff 17px)")
    [('rgb(242,242,242)', 0), ('#fff', 17)]
"""
from __future__ import annotations
import re
from typing import List, Optional, Tuple

from ..errors import CSSParseError
from ..types.stop_types import ColorSpec, Scalar

GRADIENT_RE = re.compile(
    r"^\s*(?:-(?:webkit|moz|ms|o)-)?linear-gradient\s*\((?P<body>.*)\)\s*;?\s*$",
    re.IGNORECASE | re.DOTALL,
)
LENGTH_RE = re.compile(r"^(?P<value>[-+]?(?:\d+(?:\.\d*)?|\.\d+))(?:px)?$", re.IGNORECASE)
ANGLE_RE = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:deg|rad|grad|turn)$", re.IGNORECASE)
DIRECTION_WORDS = {"to", "top", "bottom", "left", "right", "center"}
TOP_TO_BOTTOM = {"top", "to bottom", "180deg", "0.5turn"}


def split_arguments(body: str) -> List[str]:
    """Split on commas that are not inside parentheses."""
    args = []
    depth = 0
    current = []
    for char in body:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise CSSParseError("Unbalanced parentheses in linear-gradient")
        if char == "," and depth == 0:
            args.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    if depth != 0:
        raise CSSParseError("Unbalanced parentheses in linear-gradient")
    args.append("".join(current).strip())
    return args


def _is_direction(argument: str) -> bool:
    words = argument.lower().split()
    if len(words) == 1 and ANGLE_RE.match(words[0]):
        return True
    return bool(words) and all(word in DIRECTION_WORDS for word in words)


def _parse_length(text: str) -> Scalar:
    match = LENGTH_RE.match(text)
    if match is None:
        raise CSSParseError(f"Unsupported color stop length: {text!r}")
    value = float(match.group("value"))
    if value < 0:
        raise CSSParseError(f"Color stop length must be non-negative: {text!r}")
    return int(value) if value.is_integer() else value


def parse_color_stop(argument: str) -> Tuple[ColorSpec, Optional[Scalar]]:
    """
    Split ``"<color> <length>"`` into its parts.

    The length is the text after the last whitespace outside parentheses, so
    ``rgb(0, 0, 0) 4px`` keeps its color function intact. Returns None for
    the length when the stop has none.
    """
    depth = 0
    split_at = None
    for i, char in enumerate(argument):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char.isspace() and depth == 0:
            split_at = i
    if split_at is None:
        return argument, None
    color = argument[:split_at].strip()
    return color, _parse_length(argument[split_at + 1:].strip())


def parse_linear_gradient(css: str) -> List[Tuple[ColorSpec, Scalar]]:
    """
    Turn a ``linear-gradient()`` string into ``[(color, offset), ...]``.

    Args:
        css: CSS gradient value, optionally vendor-prefixed

    Returns:
        Ordered list of (color, offset) pairs

    Raises:
        CSSParseError: On malformed input, a direction other than top to
            bottom, or a stop after the first with no length.
    """
    match = GRADIENT_RE.match(css)
    if match is None:
        raise CSSParseError(f"Not a linear-gradient value: {css!r}")

    arguments = split_arguments(match.group("body"))
    if arguments and _is_direction(arguments[0]):
        direction = " ".join(arguments[0].lower().split())
        if direction not in TOP_TO_BOTTOM:
            raise CSSParseError(f"Only top to bottom gradients are supported, got {arguments[0]!r}")
        arguments = arguments[1:]

    if not arguments or not all(arguments):
        raise CSSParseError(f"linear-gradient needs at least one color stop: {css!r}")

    stops = []
    for i, argument in enumerate(arguments):
        color, offset = parse_color_stop(argument)
        if offset is None:
            if i > 0:
                raise CSSParseError(f"Color stop {argument!r} needs a length")
            offset = 0
        stops.append((color, offset))
    return stops

"""Basic css3images usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import os
import sys

import numpy as np

from css3images import Direction, LinearGradient


def demonstrate_stops() -> None:
    # Adjacent stops become segments; heights come from the later stop.
    toolbar = LinearGradient(
        width=1,
        color_stops=[("#000", 0), ("#fff", 17), ("#ccc", 18)],
    )
    print("Segments:", toolbar.color_stops)
    print("Image height:", toolbar.height)


def demonstrate_images(output_dir: str) -> None:
    grey_to_white = LinearGradient(
        width=1,
        color_stops=[("rgb(242,242,242)", 0), ("rgb(255,255,255)", 17)],
    )
    grey_to_white.write(os.path.join(output_dir, "grey_to_white.png"))

    # Blend down each strip instead of across it, with a smoothstep easing.
    button = LinearGradient(
        width=40,
        color_stops=[("#4a90d9", 0), ("#357abd", 12), ("#2a5f94", 12)],
        direction=Direction.VERTICAL,
        unit_transform=lambda u: u * u * (3 - 2 * u),
    )
    image = button.write(os.path.join(output_dir, "button.png"))
    print("Button image:", image.size, np.asarray(image)[0, 0])

    from_css = LinearGradient.from_css(
        "linear-gradient(to bottom, red 0px, hsl(240, 100%, 50%) 24px)",
        width=8,
        direction="vertical",
    )
    from_css.write(os.path.join(output_dir, "from_css.gif"))
    print("CSS gradient segments:", from_css.color_stops)


if __name__ == "__main__":
    out = sys.argv[1] if len(sys.argv) > 1 else "."
    demonstrate_stops()
    demonstrate_images(out)

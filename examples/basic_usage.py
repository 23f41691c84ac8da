"""Basic csscolors usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from csscolors import hsl, rgb, rgba, percent, deg, from_hex, np_convert


def demonstrate_colors() -> None:
    # Construct colors and convert between models.
    accent = rgb(255, 99, 71)
    print("RGB:", accent, "->", accent.to_hsl())
    print("Hex:", accent.to_hex(), "->", from_hex(accent.to_hex()))

    translucent = rgba(0, 0, 255, 0.5)
    print("RGBA as HSLA:", translucent.to_hsla())


def demonstrate_operations() -> None:
    base = hsl(90, 100, 50)
    print("darken 20%:", base.darken(percent(20)))
    print("spin 180deg:", base.spin(deg(180)))
    print("tint 50%:", base.tint(percent(50)))
    print("mix with dark red:", base.mix(rgba(100, 0, 0, 1.0), percent(50)))
    print("fadeout 25%:", base.fadeout(percent(25)))


def demonstrate_arrays() -> None:
    # Convert a whole image worth of pixels at once.
    pixels = np.array([[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [128, 128, 128]]])
    print("HSL pixels:\n", np_convert(pixels, "rgb", "hsl", output_type="percentage"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_operations()
    demonstrate_arrays()

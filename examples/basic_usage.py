"""Basic chromodels usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromodels import (
    HsbColor,
    HslColor,
    LabColor,
    RgbColor,
    HueMode,
    cast,
)


def demonstrate_colors() -> None:
    # Construct colors and convert between models.
    accent = RgbColor(255, 128, 64)
    print("RGB:", accent)
    print("RGB -> HSB:", accent.to_hsb())
    print("RGB -> LAB:", cast(accent, "lab"))

    from_hex = HslColor.from_hex("#3366CC80")
    print("HSL from hex:", from_hex, "->", from_hex.to_hex(include_alpha=True))
    print("ARGB:", hex(from_hex.argb))


def demonstrate_interpolation() -> None:
    # Hue takes the shorter arc unless told otherwise.
    start = HsbColor(350, 100, 100)
    end = HsbColor(10, 100, 100)
    print("Shortest arc midpoint:", start.interpolate(end, 0.5).hue)
    print("Longest arc midpoint:", start.interpolate(end, 0.5, hue_mode=HueMode.LONGEST).hue)

    ramp = RgbColor(0, 0, 0).lerp_to(RgbColor(255, 255, 255), 5)
    print("Gray ramp:", [c.to_hex() for c in ramp])


def demonstrate_derived_colors() -> None:
    base = LabColor.from_hex("#2E8B57")
    print("Inverted:", base.inverted.to_hex())
    print("Opposite:", base.opposite.to_hex())
    print("Warmer by half:", base.warmer(50).to_hex())
    print("Cooler by 20 degrees:", base.cooler(20, relative=False).to_hex())

    rng = np.random.default_rng(0)
    print("Random warm:", [HsbColor.random(min_hue=330, max_hue=30, rng=rng).to_hex() for _ in range(3)])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_interpolation()
    demonstrate_derived_colors()

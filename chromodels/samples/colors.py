"""
Reference colors in every model, keyed by unit sRGB.

Values are in the units the conversion functions use: hue in degrees, HSB,
HSL, HSI, HSP and CMYK channels in [0, 1], XYZ with white Y = 100, LAB and
Oklab in their native ranges.
"""
import math
from itertools import product
from typing import List, Tuple

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0)
CYAN = (0.0, 1.0, 1.0)
MAGENTA = (1.0, 0.0, 1.0)
WHITE = (1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0)
GRAY = (0.5, 0.5, 0.5)
ORANGE = (1.0, 0.5, 0.0)
PURPLE = (0.5, 0.25, 0.75)

samples_rgb_hsb = {
    RED: (0.0, 1.0, 1.0),
    GREEN: (120.0, 1.0, 1.0),
    BLUE: (240.0, 1.0, 1.0),
    YELLOW: (60.0, 1.0, 1.0),
    CYAN: (180.0, 1.0, 1.0),
    MAGENTA: (300.0, 1.0, 1.0),
    WHITE: (0.0, 0.0, 1.0),
    BLACK: (0.0, 0.0, 0.0),
    GRAY: (0.0, 0.0, 0.5),
    ORANGE: (30.0, 1.0, 1.0),
    PURPLE: (270.0, 2 / 3, 0.75),
}

samples_rgb_hsl = {
    RED: (0.0, 1.0, 0.5),
    GREEN: (120.0, 1.0, 0.5),
    BLUE: (240.0, 1.0, 0.5),
    YELLOW: (60.0, 1.0, 0.5),
    CYAN: (180.0, 1.0, 0.5),
    MAGENTA: (300.0, 1.0, 0.5),
    WHITE: (0.0, 0.0, 1.0),
    BLACK: (0.0, 0.0, 0.0),
    GRAY: (0.0, 0.0, 0.5),
    ORANGE: (30.0, 1.0, 0.5),
    PURPLE: (270.0, 0.5, 0.5),
}

samples_rgb_hsi = {
    RED: (0.0, 1.0, 1 / 3),
    GREEN: (120.0, 1.0, 1 / 3),
    BLUE: (240.0, 1.0, 1 / 3),
    YELLOW: (60.0, 1.0, 2 / 3),
    CYAN: (180.0, 1.0, 2 / 3),
    MAGENTA: (300.0, 1.0, 2 / 3),
    WHITE: (0.0, 0.0, 1.0),
    BLACK: (0.0, 0.0, 0.0),
    GRAY: (0.0, 0.0, 0.5),
}

samples_rgb_hsp = {
    RED: (0.0, 1.0, math.sqrt(0.299)),
    GREEN: (120.0, 1.0, math.sqrt(0.587)),
    BLUE: (240.0, 1.0, math.sqrt(0.114)),
    YELLOW: (60.0, 1.0, math.sqrt(0.299 + 0.587)),
    WHITE: (0.0, 0.0, 1.0),
    BLACK: (0.0, 0.0, 0.0),
    GRAY: (0.0, 0.0, 0.5),
}

samples_rgb_cmyk = {
    RED: (0.0, 1.0, 1.0, 0.0),
    GREEN: (1.0, 0.0, 1.0, 0.0),
    BLUE: (1.0, 1.0, 0.0, 0.0),
    WHITE: (0.0, 0.0, 0.0, 0.0),
    BLACK: (0.0, 0.0, 0.0, 1.0),
    GRAY: (0.0, 0.0, 0.0, 0.5),
    PURPLE: (1 / 3, 2 / 3, 0.0, 0.25),
}

samples_rgb_xyz = {
    RED: (41.24564, 21.26729, 1.93339),
    GREEN: (35.75761, 71.51522, 11.91920),
    BLUE: (18.04375, 7.21750, 95.03041),
    WHITE: (95.047, 100.0, 108.883),
    BLACK: (0.0, 0.0, 0.0),
}

samples_rgb_lab = {
    RED: (53.2408, 80.0925, 67.2032),
    GREEN: (87.7347, -86.1827, 83.1793),
    BLUE: (32.2970, 79.1875, -107.8602),
    WHITE: (100.0, 0.0, 0.0),
    BLACK: (0.0, 0.0, 0.0),
}

samples_rgb_oklab = {
    RED: (0.627955, 0.224863, 0.125846),
    GREEN: (0.866440, -0.233888, 0.179498),
    BLUE: (0.452014, -0.032457, -0.311528),
    WHITE: (1.0, 0.0, 0.0),
    BLACK: (0.0, 0.0, 0.0),
}


def rgb_grid(steps: int = 6) -> List[Tuple[float, float, float]]:
    """Every unit RGB triple on an evenly spaced ``steps``^3 lattice."""
    levels = [i / (steps - 1) for i in range(steps)]
    return list(product(levels, levels, levels))


__all__ = [
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "WHITE",
    "BLACK",
    "GRAY",
    "ORANGE",
    "PURPLE",
    "samples_rgb_hsb",
    "samples_rgb_hsl",
    "samples_rgb_hsi",
    "samples_rgb_hsp",
    "samples_rgb_cmyk",
    "samples_rgb_xyz",
    "samples_rgb_lab",
    "samples_rgb_oklab",
    "rgb_grid",
]

from typing import Tuple

import numpy as np

from .srgb import np_srgb_to_linear

# linear sRGB -> LMS
M1_OKLAB = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# cube-rooted LMS -> Lab
M2_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])


def unit_rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit sRGB to Oklab.

    Returns:
        (lightness [0, 1], a, b) where a and b stay within about +-0.32 for sRGB
    """
    lms = M1_OKLAB @ np_srgb_to_linear(np.array([r, g, b]))
    lightness, a, b_ = M2_OKLAB @ np.cbrt(lms)
    return float(lightness), float(a), float(b_)

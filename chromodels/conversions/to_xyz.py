from typing import Tuple

import numpy as np

from ..types.channel_types import D65_X, D65_Y, D65_Z
from .srgb import np_srgb_to_linear

XYZ_SCALE = 100.0

# linear sRGB -> CIE XYZ (D65)
M_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
M_XYZ_TO_SRGB = np.linalg.inv(M_SRGB_TO_XYZ)

# CIE constants
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit sRGB to CIE XYZ scaled so that white has Y = 100.
    """
    linear = np_srgb_to_linear(np.array([r, g, b]))
    x, y, z = M_SRGB_TO_XYZ @ linear * XYZ_SCALE
    return float(x), float(y), float(z)


def _f_inv(t: float) -> float:
    cube = t ** 3
    return cube if cube > LAB_EPSILON else (116 * t - 16) / LAB_KAPPA


def lab_to_xyz(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert CIE L*a*b* (D65) to XYZ."""
    fy = (lightness + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    yr = fy ** 3 if lightness > LAB_KAPPA * LAB_EPSILON else lightness / LAB_KAPPA
    return _f_inv(fx) * D65_X, yr * D65_Y, _f_inv(fz) * D65_Z

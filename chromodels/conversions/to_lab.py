from typing import Tuple

from ..types.channel_types import D65_X, D65_Y, D65_Z
from .to_xyz import LAB_EPSILON, LAB_KAPPA, unit_rgb_to_xyz


def _f(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else (LAB_KAPPA * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ (white Y = 100) to CIE L*a*b* under D65."""
    fx = _f(x / D65_X)
    fy = _f(y / D65_Y)
    fz = _f(z / D65_Z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def unit_rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return xyz_to_lab(*unit_rgb_to_xyz(r, g, b))

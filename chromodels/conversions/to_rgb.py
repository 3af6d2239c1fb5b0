import math
from typing import Tuple

import numpy as np

from ..types.channel_types import HSP_PB, HSP_PG, HSP_PR, HUE_360
from ..utils.interpolation import wrap_hue
from .srgb import UnitRGB, clip_unit_rgb, np_linear_to_srgb
from .to_oklab import M1_OKLAB, M2_OKLAB
from .to_xyz import M_XYZ_TO_SRGB, XYZ_SCALE, lab_to_xyz

M1_OKLAB_INV = np.linalg.inv(M1_OKLAB)
M2_OKLAB_INV = np.linalg.inv(M2_OKLAB)


def _sector(h: float) -> Tuple[int, float]:
    """Split a hue into its 60-degree sector index and fractional position."""
    h = wrap_hue(h) / 60.0
    i = int(h) % 6
    return i, h - math.floor(h)


def hsb_to_unit_rgb(h: float, s: float, v: float) -> UnitRGB:
    """
    Convert HSB to unit RGB.

    Args:
        h: hue in degrees
        s: saturation [0, 1]
        v: brightness [0, 1]
    """
    if s == 0:
        return v, v, v
    i, f = _sector(h)
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))
    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i]


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    """
    Convert HSL to unit RGB.

    Args:
        h: hue in degrees
        s: saturation [0, 1]
        l: lightness [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    i, f = _sector(h)
    x = chroma * (1 - abs((i % 2 + f) - 1))
    m = l - chroma / 2
    r, g, b = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[i]
    return clip_unit_rgb(r + m, g + m, b + m, "hsl")


def hsi_to_unit_rgb(h: float, s: float, i: float) -> UnitRGB:
    """
    Convert HSI to unit RGB.

    Not every HSI triple is displayable; results are clipped to the sRGB gamut.
    """
    if s == 0:
        return clip_unit_rgb(i, i, i, "hsi")
    h = wrap_hue(h)
    # rotate into the first 120-degree sector, then permute back
    sector = int(h // 120) % 3
    angle = math.radians(h - 120 * sector)
    low = i * (1 - s)
    high = i * (1 + s * math.cos(angle) / math.cos(math.radians(60) - angle))
    rest = 3 * i - (low + high)
    if sector == 0:
        r, g, b = high, rest, low
    elif sector == 1:
        r, g, b = low, high, rest
    else:
        r, g, b = rest, low, high
    return clip_unit_rgb(r, g, b, "hsi")


# (max, mid, min) channel order and hue direction for each 60-degree sector.
# ascending sectors measure the mid channel from the sector start, the others
# from its end.
_HSP_SECTORS = (
    ((0, 1, 2), 0, True),
    ((1, 0, 2), 2, False),
    ((1, 2, 0), 2, True),
    ((2, 1, 0), 4, False),
    ((2, 0, 1), 4, True),
    ((0, 2, 1), 6, False),
)
_HSP_WEIGHTS = (HSP_PR, HSP_PG, HSP_PB)


def hsp_to_unit_rgb(h: float, s: float, p: float) -> UnitRGB:
    """
    Convert HSP (hue, saturation, perceived brightness) to unit RGB.

    Follows Darel Rex Finley's HSP model: the max, mid and min channels are
    solved so that sqrt(.299 R^2 + .587 G^2 + .114 B^2) equals ``p``. High
    perceived brightness with saturated blue hues leaves the gamut and is
    clipped.
    """
    position = wrap_hue(h) / HUE_360 * 6
    index = min(int(position), 5)
    (hi, mid, lo), anchor, ascending = _HSP_SECTORS[index]
    frac = position - anchor if ascending else anchor - position
    w_hi, w_mid, w_lo = _HSP_WEIGHTS[hi], _HSP_WEIGHTS[mid], _HSP_WEIGHTS[lo]

    min_over_max = 1 - s
    rgb = [0.0, 0.0, 0.0]
    if min_over_max > 0:
        part = 1 + frac * (1 / min_over_max - 1)
        low = p / math.sqrt(w_hi / min_over_max ** 2 + w_mid * part * part + w_lo)
        high = low / min_over_max
        rgb[hi], rgb[lo] = high, low
        rgb[mid] = low + frac * (high - low)
    else:
        high = math.sqrt(p * p / (w_hi + w_mid * frac * frac))
        rgb[hi], rgb[mid] = high, high * frac
    return clip_unit_rgb(*rgb, source="hsp")


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> UnitRGB:
    """Convert CMYK (each [0, 1]) to unit RGB."""
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


def xyz_to_unit_rgb(x: float, y: float, z: float) -> UnitRGB:
    """Convert XYZ (white Y = 100) to unit sRGB, clipping to the gamut."""
    linear = M_XYZ_TO_SRGB @ (np.array([x, y, z]) / XYZ_SCALE)
    r, g, b = np_linear_to_srgb(linear)
    return clip_unit_rgb(float(r), float(g), float(b), "xyz")


def lab_to_unit_rgb(lightness: float, a: float, b: float) -> UnitRGB:
    return xyz_to_unit_rgb(*lab_to_xyz(lightness, a, b))


def oklab_to_unit_rgb(lightness: float, a: float, b: float) -> UnitRGB:
    """Convert Oklab to unit sRGB, clipping to the gamut."""
    lms = (M2_OKLAB_INV @ np.array([lightness, a, b])) ** 3
    r, g, b_ = np_linear_to_srgb(M1_OKLAB_INV @ lms)
    return clip_unit_rgb(float(r), float(g), float(b_), "oklab")

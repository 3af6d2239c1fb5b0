import math
from typing import Tuple

from ..types.channel_types import HSP_PB, HSP_PG, HSP_PR
from .to_hsb import hexcone_hue


def perceived_brightness(r: float, g: float, b: float) -> float:
    """sqrt(.299 R^2 + .587 G^2 + .114 B^2) on unit RGB."""
    return math.sqrt(HSP_PR * r * r + HSP_PG * g * g + HSP_PB * b * b)


def unit_rgb_to_hsp(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSP (hue, saturation, perceived brightness).

    Hue and saturation match HSB; brightness is the weighted quadratic mean.
    """
    p = perceived_brightness(r, g, b)
    cmax = max(r, g, b)
    if cmax == min(r, g, b):
        return 0.0, 0.0, p
    return hexcone_hue(r, g, b), 1 - min(r, g, b) / cmax, p

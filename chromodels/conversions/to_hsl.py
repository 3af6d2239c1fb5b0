from typing import Tuple

from .to_hsb import hexcone_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Returns:
        (hue [0, 360), saturation [0, 1], lightness [0, 1])
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2
    if delta == 0:
        return 0.0, 0.0, lightness
    saturation = delta / (1 - abs(2 * lightness - 1))
    return hexcone_hue(r, g, b), min(saturation, 1.0), lightness

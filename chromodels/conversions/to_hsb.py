from typing import Tuple

from ..utils.interpolation import wrap_hue


def hexcone_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees [0, 360) from unit RGB using the six-sector formula.

    Achromatic input (max == min) has no hue; 0 is returned.
    """
    cmax = max(r, g, b)
    delta = cmax - min(r, g, b)
    if delta == 0:
        return 0.0
    if cmax == r:
        h = ((g - b) / delta) % 6
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return wrap_hue(60.0 * h)


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSB (a.k.a. HSV).

    Returns:
        (hue [0, 360), saturation [0, 1], brightness [0, 1])
    """
    brightness = max(r, g, b)
    if brightness == 0:
        return 0.0, 0.0, 0.0
    saturation = (brightness - min(r, g, b)) / brightness
    return hexcone_hue(r, g, b), saturation, brightness

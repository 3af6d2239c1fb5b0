import math
from typing import Tuple

from boundednumbers.functions import clamp

from ..types.channel_types import HUE_360


def unit_rgb_to_hsi(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSI using the geometric (arccos) hue.

    Returns:
        (hue [0, 360), saturation [0, 1], intensity [0, 1])
    """
    intensity = (r + g + b) / 3
    cmin = min(r, g, b)
    if intensity == 0 or max(r, g, b) == cmin:
        return 0.0, 0.0, intensity

    saturation = 1 - cmin / intensity
    numerator = 0.5 * ((r - g) + (r - b))
    denominator = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    theta = math.degrees(math.acos(clamp(numerator / denominator, -1.0, 1.0)))
    hue = theta if b <= g else HUE_360 - theta
    if hue >= HUE_360:
        hue = 0.0
    return hue, saturation, intensity

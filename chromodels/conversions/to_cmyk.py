from typing import Tuple


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert unit RGB to CMYK with full black generation.

    Returns:
        (cyan, magenta, yellow, black), each in [0, 1]
    """
    black = 1 - max(r, g, b)
    if black >= 1:
        return 0.0, 0.0, 0.0, 1.0
    denom = 1 - black
    return (
        (1 - r - black) / denom,
        (1 - g - black) / denom,
        (1 - b - black) / denom,
        black,
    )

import logging
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

logger = logging.getLogger(__name__)

UnitRGB = Tuple[float, float, float]

# Tolerance below which clipping into [0, 1] is treated as float noise
GAMUT_EPS = 1e-9


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= 0.04045,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    # negative light has no sRGB encoding; keep the linear segment for it
    safe = np.maximum(c, 0.0031308)
    return np.where(
        c <= 0.0031308,
        12.92 * c,
        1.055 * (safe ** (1 / 2.4)) - 0.055
    )


def clip_unit_rgb(r: float, g: float, b: float, source: str = "") -> UnitRGB:
    """
    Clip unit RGB into the displayable gamut.

    Models that can describe colors outside sRGB lose information here,
    which is logged at DEBUG.
    """
    if any(c < -GAMUT_EPS or c > 1 + GAMUT_EPS for c in (r, g, b)):
        logger.debug("Clipping out-of-gamut %s color to sRGB: (%r, %r, %r)", source or "unit", r, g, b)
    return (
        float(clamp(r, 0.0, 1.0)),
        float(clamp(g, 0.0, 1.0)),
        float(clamp(b, 0.0, 1.0)),
    )

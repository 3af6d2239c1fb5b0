import logging
from typing import Callable, Dict, Sequence, Tuple

from ..types.channel_types import CHANNELS
from ..types.color_types import XYZ_HUB_SPACES, ColorSpace, ScalarVector, as_color_space
from ..utils.validation import fit_values
from .srgb import UnitRGB
from .to_cmyk import unit_rgb_to_cmyk
from .to_hsb import unit_rgb_to_hsb
from .to_hsi import unit_rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl
from .to_hsp import unit_rgb_to_hsp
from .to_lab import unit_rgb_to_lab, xyz_to_lab
from .to_oklab import unit_rgb_to_oklab
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    lab_to_unit_rgb,
    oklab_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .to_xyz import lab_to_xyz, unit_rgb_to_xyz

logger = logging.getLogger(__name__)


def _identity(*values: float) -> Tuple[float, ...]:
    return tuple(values)


# Every space reaches every other one through unit sRGB ...
TO_UNIT_RGB: Dict[ColorSpace, Callable[..., UnitRGB]] = {
    ColorSpace.RGB: _identity,
    ColorSpace.HSB: hsb_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HSI: hsi_to_unit_rgb,
    ColorSpace.HSP: hsp_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
    ColorSpace.LAB: lab_to_unit_rgb,
    ColorSpace.XYZ: xyz_to_unit_rgb,
    ColorSpace.OKLAB: oklab_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, Callable[..., Tuple[float, ...]]] = {
    ColorSpace.RGB: _identity,
    ColorSpace.HSB: unit_rgb_to_hsb,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.HSI: unit_rgb_to_hsi,
    ColorSpace.HSP: unit_rgb_to_hsp,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
    ColorSpace.LAB: unit_rgb_to_lab,
    ColorSpace.XYZ: unit_rgb_to_xyz,
    ColorSpace.OKLAB: unit_rgb_to_oklab,
}

# ... except LAB <-> XYZ, which stay in CIE XYZ and never touch the sRGB gamut
CONVERT_XYZ_HUB: Dict[Tuple[ColorSpace, ColorSpace], Callable[..., Tuple[float, ...]]] = {
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
}


def normalize(values: Sequence[float], space: ColorSpace) -> Tuple[float, ...]:
    """Native channel values -> the unit representation conversions work in."""
    return tuple(v / c.unit_scale for v, c in zip(values, CHANNELS[space]))


def scale(values: Sequence[float], space: ColorSpace) -> Tuple[float, ...]:
    """Unit representation -> native channel values, fitted into bounds."""
    channels = CHANNELS[space]
    return fit_values(channels, [v * c.unit_scale for v, c in zip(values, channels)])


def to_unit_rgb(values: Sequence[float], space: ColorSpace | str) -> UnitRGB:
    space = as_color_space(space)
    return TO_UNIT_RGB[space](*normalize(values, space))


def from_unit_rgb(rgb: Sequence[float], space: ColorSpace | str) -> ScalarVector:
    space = as_color_space(space)
    return scale(FROM_UNIT_RGB[space](*rgb), space)


def convert(
    values: Sequence[float],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ScalarVector:
    """
    Convert native channel values between any two supported color spaces.

    Alpha is not part of ``values``; it passes through color models untouched.

    Args:
        values: Channel values in ``from_space``'s native ranges
        from_space: Source color space
        to_space: Target color space

    Returns:
        Channel values in ``to_space``'s native ranges
    """
    from_space = as_color_space(from_space)
    to_space = as_color_space(to_space)
    if from_space == to_space:
        return tuple(values)

    key = (from_space, to_space)
    if from_space in XYZ_HUB_SPACES and to_space in XYZ_HUB_SPACES:
        logger.debug("Converting %s -> %s through XYZ", from_space.value, to_space.value)
        return scale(CONVERT_XYZ_HUB[key](*normalize(values, from_space)), to_space)

    logger.debug("Converting %s -> %s through sRGB", from_space.value, to_space.value)
    return from_unit_rgb(to_unit_rgb(values, from_space), to_space)

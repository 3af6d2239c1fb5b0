from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union

from ..errors import UnknownColorSpace

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelValues = Union[ScalarVector, Sequence[Scalar]]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSB = "hsb"
    HSL = "hsl"
    HSI = "hsi"
    HSP = "hsp"
    CMYK = "cmyk"
    LAB = "lab"
    XYZ = "xyz"
    OKLAB = "oklab"


HUE_SPACES = {ColorSpace.HSB, ColorSpace.HSL, ColorSpace.HSI, ColorSpace.HSP}

# Spaces that convert through CIE XYZ rather than sRGB when paired together
XYZ_HUB_SPACES = {ColorSpace.XYZ, ColorSpace.LAB}


def as_color_space(space: ColorSpace | str) -> ColorSpace:
    """
    Coerce a color space name or enum member to a ColorSpace.

    Args:
        space: ColorSpace member or case-insensitive name ("hsb", "Lab", ...)

    Returns:
        The matching ColorSpace

    Raises:
        UnknownColorSpace: if the name does not match any supported space
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise UnknownColorSpace(space) from None


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space has a hue channel (HSB, HSL, HSI or HSP).

    Args:
        color_space: Color space enum or string
    Returns:
        True if hue-based, False otherwise
    """
    return as_color_space(color_space) in HUE_SPACES

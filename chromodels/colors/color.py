from __future__ import annotations
from typing import Dict

from ..conversions import convert
from ..errors import UnknownColorSpace
from ..types.color_types import ColorSpace, as_color_space
from .cmyk import CmykColor
from .color_base import ColorModel, build_registry
from .hsb import HsbColor
from .hsi import HsiColor
from .hsl import HslColor
from .hsp import HspColor
from .lab import LabColor
from .oklab import OklabColor
from .rgb import RgbColor
from .xyz import XyzColor

unified_space_to_class: Dict[ColorSpace, type[ColorModel]] = build_registry(
    RgbColor,
    HsbColor,
    HslColor,
    HsiColor,
    HspColor,
    CmykColor,
    LabColor,
    XyzColor,
    OklabColor,
)


def get_color_class(color_space: ColorSpace | str) -> type[ColorModel]:
    color_class = unified_space_to_class.get(as_color_space(color_space))
    if color_class is None:
        raise UnknownColorSpace(color_space)
    return color_class


def color_to(self: ColorModel, space: ColorSpace | str) -> ColorModel:
    """
    Convert this color to another color space, keeping its alpha.

    Args:
        space: Target color space (e.g. ColorSpace.HSB or "hsb")

    Returns:
        New instance of the target model's class, or ``self`` when the
        space is unchanged
    """
    cls = get_color_class(space)
    if cls.mode == self.mode:
        return self
    return cls._make(convert(self.value, self.mode, cls.mode), self.alpha)


ColorModel.to = color_to


def cast(color: ColorModel, color_space: ColorSpace | str) -> ColorModel:
    """
    Return ``color`` as an instance of the class registered for ``color_space``.

    Raises:
        UnknownColorSpace: if ``color_space`` is not a supported space
    """
    return color.to(color_space)

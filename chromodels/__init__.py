"""Chromodels: immutable multi-model color values with lossless hub conversions."""

import logging

from .colors import (
    ColorModel,
    RgbColor,
    HsbColor,
    HslColor,
    HsiColor,
    HspColor,
    CmykColor,
    LabColor,
    XyzColor,
    OklabColor,
    cast,
    get_color_class,
)
from .conversions import convert, to_unit_rgb, from_unit_rgb
from .errors import (
    ColorModelError,
    RangeViolation,
    ArityMismatch,
    InvalidStep,
    InvalidRandomRange,
    InvalidAdjustment,
    InvalidHexString,
    UnknownColorSpace,
)
from .types.color_types import ColorSpace, HUE_SPACES, is_hue_space
from .utils.interpolation import HueMode

# Friendly aliases
HsvColor = HsbColor
Color = ColorModel

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # color models
    "ColorModel",
    "RgbColor",
    "HsbColor",
    "HslColor",
    "HsiColor",
    "HspColor",
    "CmykColor",
    "LabColor",
    "XyzColor",
    "OklabColor",
    "HsvColor",
    "Color",
    # cast layer
    "cast",
    "get_color_class",
    # conversions
    "convert",
    "to_unit_rgb",
    "from_unit_rgb",
    "ColorSpace",
    "HUE_SPACES",
    "is_hue_space",
    "HueMode",
    # errors
    "ColorModelError",
    "RangeViolation",
    "ArityMismatch",
    "InvalidStep",
    "InvalidRandomRange",
    "InvalidAdjustment",
    "InvalidHexString",
    "UnknownColorSpace",
    "__version__",
]

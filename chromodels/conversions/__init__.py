"""
Chromodels Color Space Conversions
==================================

Pure conversion functions between sRGB and every supported color model, plus
a router that converts native channel values between any two of them.

Conversion Graph
----------------
Every model converts to and from unit sRGB (channels in [0, 1]), which acts
as the hub. LAB and XYZ additionally convert directly into each other through
CIE XYZ so that colors outside the sRGB gamut survive that pair.

RGB -> model:
    unit_rgb_to_hsb, unit_rgb_to_hsl, unit_rgb_to_hsi, unit_rgb_to_hsp,
    unit_rgb_to_cmyk, unit_rgb_to_xyz, unit_rgb_to_lab, unit_rgb_to_oklab

model -> RGB:
    hsb_to_unit_rgb, hsl_to_unit_rgb, hsi_to_unit_rgb, hsp_to_unit_rgb,
    cmyk_to_unit_rgb, xyz_to_unit_rgb, lab_to_unit_rgb, oklab_to_unit_rgb

XYZ hub:
    xyz_to_lab, lab_to_xyz

Units
-----
Hues are degrees in [0, 360). HSB, HSL, HSI, HSP and CMYK channels are unit
floats; XYZ uses Y = 100 for white; LAB and Oklab use their native ranges.
``convert`` takes and returns the native ranges used by the color classes
(percentages for HSB and friends, 0-255 for RGB).

Examples
--------
>>> from chromodels.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb, convert
>>> unit_rgb_to_hsb(1.0, 0.0, 0.0)
(0.0, 1.0, 1.0)
>>> convert((255, 0, 0), "rgb", "hsb")
(0.0, 100.0, 100.0)
"""

from .to_hsb import unit_rgb_to_hsb, hexcone_hue
from .to_hsl import unit_rgb_to_hsl
from .to_hsi import unit_rgb_to_hsi
from .to_hsp import unit_rgb_to_hsp, perceived_brightness
from .to_cmyk import unit_rgb_to_cmyk
from .to_xyz import unit_rgb_to_xyz, lab_to_xyz
from .to_lab import unit_rgb_to_lab, xyz_to_lab
from .to_oklab import unit_rgb_to_oklab
from .to_rgb import (
    hsb_to_unit_rgb,
    hsl_to_unit_rgb,
    hsi_to_unit_rgb,
    hsp_to_unit_rgb,
    cmyk_to_unit_rgb,
    xyz_to_unit_rgb,
    lab_to_unit_rgb,
    oklab_to_unit_rgb,
)
from .srgb import np_srgb_to_linear, np_linear_to_srgb

# High-level API
from .wrapper import convert, to_unit_rgb, from_unit_rgb

from ..types.color_types import ColorSpace

__all__ = [
    # RGB -> model
    'unit_rgb_to_hsb',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsi',
    'unit_rgb_to_hsp',
    'unit_rgb_to_cmyk',
    'unit_rgb_to_xyz',
    'unit_rgb_to_lab',
    'unit_rgb_to_oklab',

    # model -> RGB
    'hsb_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsi_to_unit_rgb',
    'hsp_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'xyz_to_unit_rgb',
    'lab_to_unit_rgb',
    'oklab_to_unit_rgb',

    # XYZ hub
    'xyz_to_lab',
    'lab_to_xyz',

    # Helpers
    'hexcone_hue',
    'perceived_brightness',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # High-level API
    'convert',
    'to_unit_rgb',
    'from_unit_rgb',

    # Types
    'ColorSpace',
]

"""
Chromodels Color Classes
========================

Immutable color value classes for nine color models that all convert through
sRGB (with CIE XYZ as a secondary hub for LAB and XYZ).

Features
--------
- Immutable instances (frozen after initialization), value equality
- Channel validation on construction; nothing is clamped silently
- Conversion to any other model, keeping alpha
- Interpolation with shortest-arc hue blending and N-step sequences
- Derived colors: inverted, opposite, rotate_hue, warmer, cooler
- Named constructors from lists, 0-1 lists, hex strings and ARGB integers
- Random colors within per-channel bounds

Usage
-----
>>> from chromodels.colors import HsbColor, RgbColor
>>>
>>> red = HsbColor.from_hex("#F00")
>>> red.value
(0.0, 100.0, 100.0)
>>> red.to_rgb()
RgbColor(red=255.0, green=0.0, blue=0.0, alpha=255)
>>>
>>> # Interpolate across the 0/360 seam
>>> HsbColor(350, 100, 100).interpolate(HsbColor(10, 100, 100), 0.5).hue
0.0
>>>
>>> # Operands from other models are converted into the receiver's model
>>> steps = red.lerp_to(RgbColor(0, 0, 255), 3)
>>> [type(c).__name__ for c in steps]
['HsbColor', 'HsbColor', 'HsbColor']

Color Classes
-------------
    - RgbColor:   red, green, blue (0-255)
    - HsbColor:   hue (0-360), saturation, brightness (0-100)
    - HslColor:   hue (0-360), saturation, lightness (0-100)
    - HsiColor:   hue (0-360), saturation, intensity (0-100)
    - HspColor:   hue (0-360), saturation, perceived_brightness (0-100)
    - CmykColor:  cyan, magenta, yellow, black (0-100)
    - LabColor:   lightness (0-100), a, b (-128-127)
    - XyzColor:   x (0-95.047), y (0-100), z (0-108.883)
    - OklabColor: lightness (0-1), a, b (-0.5-0.5)

Every class carries an integer alpha (0-255, default 255).

Notes
-----
- Models that can express colors outside sRGB (LAB, XYZ, Oklab, HSI, HSP)
  are clipped to the gamut when they pass through the RGB hub
- Achromatic colors have no hue; conversions report hue 0 for them
"""

from .color_base import ColorModel
from .rgb import RgbColor
from .hsb import HsbColor
from .hsl import HslColor
from .hsi import HsiColor
from .hsp import HspColor
from .cmyk import CmykColor
from .lab import LabColor
from .xyz import XyzColor
from .oklab import OklabColor
from .color import cast, color_to, get_color_class, unified_space_to_class

__all__ = [
    'ColorModel',
    'RgbColor',
    'HsbColor',
    'HslColor',
    'HsiColor',
    'HspColor',
    'CmykColor',
    'LabColor',
    'XyzColor',
    'OklabColor',
    'cast',
    'color_to',
    'get_color_class',
    'unified_space_to_class',
]

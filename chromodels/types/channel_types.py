from __future__ import annotations
from typing import Dict, NamedTuple, Tuple

from .color_types import ColorSpace


class Channel(NamedTuple):
    name: str
    lower: float
    upper: float
    cyclic: bool = False
    # divisor taking the native value to the unit value used by conversions
    unit_scale: float = 1.0

    @property
    def span(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


HUE_360 = 360
ALPHA_MAX = 255
RGB_MAX = 255
PERCENT_MAX = 100

# Anchors for warmer()/cooler()
WARM_HUE = 0.0
COOL_HUE = 180.0

# D65 reference white, XYZ scaled to Y = 100
D65_X = 95.047
D65_Y = 100.0
D65_Z = 108.883

# Perceived brightness weights (Finley HSP)
HSP_PR = 0.299
HSP_PG = 0.587
HSP_PB = 0.114

HUE = Channel("hue", 0, HUE_360, cyclic=True)


def _percent(name: str) -> Channel:
    return Channel(name, 0, PERCENT_MAX, unit_scale=PERCENT_MAX)


def _byte(name: str) -> Channel:
    return Channel(name, 0, RGB_MAX, unit_scale=RGB_MAX)


CHANNELS: Dict[ColorSpace, Tuple[Channel, ...]] = {
    ColorSpace.RGB: (_byte("red"), _byte("green"), _byte("blue")),
    ColorSpace.HSB: (HUE, _percent("saturation"), _percent("brightness")),
    ColorSpace.HSL: (HUE, _percent("saturation"), _percent("lightness")),
    ColorSpace.HSI: (HUE, _percent("saturation"), _percent("intensity")),
    ColorSpace.HSP: (HUE, _percent("saturation"), _percent("perceived_brightness")),
    ColorSpace.CMYK: (_percent("cyan"), _percent("magenta"), _percent("yellow"), _percent("black")),
    ColorSpace.LAB: (
        Channel("lightness", 0, PERCENT_MAX),
        Channel("a", -128, 127),
        Channel("b", -128, 127),
    ),
    ColorSpace.XYZ: (
        Channel("x", 0, D65_X),
        Channel("y", 0, D65_Y),
        Channel("z", 0, D65_Z),
    ),
    ColorSpace.OKLAB: (
        Channel("lightness", 0, 1),
        Channel("a", -0.5, 0.5),
        Channel("b", -0.5, 0.5),
    ),
}

ALPHA = Channel("alpha", 0, ALPHA_MAX, unit_scale=ALPHA_MAX)


def channel_names(space: ColorSpace) -> Tuple[str, ...]:
    return tuple(channel.name for channel in CHANNELS[space])


def hue_index(space: ColorSpace) -> int | None:
    """Index of the cyclic channel of a space, or None when it has none."""
    for i, channel in enumerate(CHANNELS[space]):
        if channel.cyclic:
            return i
    return None

from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, RGB_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class RgbColor(ColorModel):
    """
    A color in the sRGB color space, the hub every other model converts through.

    Channels are 0-255. They may hold fractional values so that conversions
    through the hub stay lossless; rounding happens in to_argb() and to_hex().
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.RGB]

    def __init__(self, red: float, green: float, blue: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((red, green, blue), alpha)

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    def to_rgb(self) -> RgbColor:
        return self

    @classmethod
    def random(
        cls,
        min_red: float = 0,
        max_red: float = RGB_MAX,
        min_green: float = 0,
        max_green: float = RGB_MAX,
        min_blue: float = 0,
        max_blue: float = RGB_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> RgbColor:
        return cls._sample(
            (
                (min_red, max_red),
                (min_green, max_green),
                (min_blue, max_blue),
            ),
            rng,
        )

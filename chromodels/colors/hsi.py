from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, HUE_360, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class HsiColor(ColorModel):
    """
    A color in the HSI (hue, saturation, intensity) color space.

    Intensity is the mean of the RGB channels. Some HSI triples with high
    saturation and intensity fall outside sRGB and are clipped on conversion.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HSI
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.HSI]

    def __init__(self, hue: float, saturation: float, intensity: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, intensity), alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def intensity(self) -> float:
        return self._value[2]

    def with_hue(self, hue: float) -> HsiColor:
        return self._with(0, hue)

    def with_saturation(self, saturation: float) -> HsiColor:
        return self._with(1, saturation)

    def with_intensity(self, intensity: float) -> HsiColor:
        return self._with(2, intensity)

    @classmethod
    def random(
        cls,
        min_hue: float = 0,
        max_hue: float = HUE_360,
        min_saturation: float = 0,
        max_saturation: float = PERCENT_MAX,
        min_intensity: float = 0,
        max_intensity: float = PERCENT_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> HsiColor:
        return cls._sample(
            (
                (min_hue, max_hue),
                (min_saturation, max_saturation),
                (min_intensity, max_intensity),
            ),
            rng,
        )

from __future__ import annotations
from typing import ClassVar, Optional, Tuple

import numpy as np

from ..types.channel_types import ALPHA_MAX, CHANNELS, HUE_360, PERCENT_MAX, Channel
from ..types.color_types import ColorSpace
from .color_base import ColorModel


class HslColor(ColorModel):
    """
    A color in the HSL (hue, saturation, lightness) color space.

    ``hue`` is in [0, 360]; ``saturation`` and ``lightness`` are in [0, 100].
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[Channel, ...]] = CHANNELS[ColorSpace.HSL]

    def __init__(self, hue: float, saturation: float, lightness: float, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, lightness), alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]

    def with_hue(self, hue: float) -> HslColor:
        return self._with(0, hue)

    def with_saturation(self, saturation: float) -> HslColor:
        return self._with(1, saturation)

    def with_lightness(self, lightness: float) -> HslColor:
        return self._with(2, lightness)

    @classmethod
    def random(
        cls,
        min_hue: float = 0,
        max_hue: float = HUE_360,
        min_saturation: float = 0,
        max_saturation: float = PERCENT_MAX,
        min_lightness: float = 0,
        max_lightness: float = PERCENT_MAX,
        rng: Optional[np.random.Generator] = None,
    ) -> HslColor:
        """Generate an HslColor at random; see HsbColor.random for the hue range rules."""
        return cls._sample(
            (
                (min_hue, max_hue),
                (min_saturation, max_saturation),
                (min_lightness, max_lightness),
            ),
            rng,
        )
